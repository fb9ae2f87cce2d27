"""Tests for conventional commit classification."""

from __future__ import annotations

import pytest

from release_tagger.core.commits import commit_messages, detect_change_type, is_breaking_change
from release_tagger.core.version import BumpType
from release_tagger.vcs.host import Commit


class TestIsBreakingChange:
    """Tests for is_breaking_change()."""

    @pytest.mark.parametrize(
        "message",
        [
            "feat!: message",
            "feat(scope)!: message",
            "fix(scope)!: message",
            "feat_dasda(scope)!: message",
            "chore!: message",
            "refactor(core/api)!: rename everything",
        ],
    )
    def test_breaking(self, message: str):
        """Type with ! before the colon is breaking."""
        assert is_breaking_change(message)

    @pytest.mark.parametrize(
        "message",
        [
            "chore: message",
            "fix: message",
            "fix(scope): message",
            "invalid message",
            "feat!:",
            "feat!: ",
            "feat()!: empty scope",
            "feat !: space before marker",
            "Revert \"feat!: something\"",
            "",
        ],
    )
    def test_not_breaking(self, message: str):
        """Anything without the marker in the header position is not breaking."""
        assert not is_breaking_change(message)

    def test_breaking_with_body(self):
        """A body after the header does not matter."""
        assert is_breaking_change("feat(api)!: drop v1\n\nOld clients must upgrade.")


class TestDetectChangeType:
    """Tests for detect_change_type()."""

    def test_patch(self):
        assert detect_change_type(["fix: Something", "fix: Other patch"]) == BumpType.PATCH

    def test_minor(self):
        messages = ["feat: Something", "fix: Other patch", "chore: release v1"]
        assert detect_change_type(messages) == BumpType.MINOR

    def test_major(self):
        assert detect_change_type(["feat!: Something", "fix: Other patch"]) == BumpType.MAJOR

    def test_major_with_scope(self):
        messages = ["feat(scope)!: Something", "fix: Other patch"]
        assert detect_change_type(messages) == BumpType.MAJOR

    def test_empty_is_patch(self):
        assert detect_change_type([]) == BumpType.PATCH

    def test_first_match_wins(self):
        """A feat before a breaking change stops the scan at minor."""
        messages = ["fix: a", "feat: b", "fix!: c"]
        assert detect_change_type(messages) == BumpType.MINOR

    def test_feat_prefix_has_no_word_boundary(self):
        """'feature' also starts with 'feat'."""
        assert detect_change_type(["feature: big thing"]) == BumpType.MINOR

    def test_feat_is_case_sensitive(self):
        assert detect_change_type(["Feat: capitalised", "FEAT: shouting"]) == BumpType.PATCH

    def test_accepts_generator(self):
        messages = (m for m in ["docs: readme", "feat(ui): button"])
        assert detect_change_type(messages) == BumpType.MINOR

    def test_idempotent(self):
        messages = ["fix: a", "feat!: b"]
        assert detect_change_type(messages) == detect_change_type(messages)


class TestCommitMessages:
    """Tests for commit_messages()."""

    def test_preserves_order(self):
        commits = [Commit("b", "feat: second"), Commit("a", "fix: first")]
        assert commit_messages(commits) == ["feat: second", "fix: first"]
