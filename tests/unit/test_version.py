"""Tests for version parsing and increments."""

from __future__ import annotations

import pytest

from release_tagger.core.version import (
    INITIAL_VERSION,
    BumpType,
    Version,
    increase_version,
    parse_version,
)
from release_tagger.exceptions import InvalidVersionError


class TestBumpType:
    """Tests for BumpType ordering."""

    def test_ordered_by_impact(self):
        """patch < minor < major."""
        assert BumpType.PATCH < BumpType.MINOR < BumpType.MAJOR
        assert max([BumpType.MINOR, BumpType.MAJOR, BumpType.PATCH]) == BumpType.MAJOR

    def test_string_value(self):
        """BumpType renders as its lowercase name."""
        assert str(BumpType.MINOR) == "minor"
        assert BumpType("major") is BumpType.MAJOR


class TestVersionParse:
    """Tests for Version.parse()."""

    def test_parse_simple(self):
        """Parse a plain version."""
        assert Version.parse("1.2.3") == Version(1, 2, 3)

    def test_parse_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert parse_version(" 10.0.7\n") == Version(10, 0, 7)

    @pytest.mark.parametrize(
        "value",
        ["", "1", "1.2", "1.2.3.4", "a.b.c", "1.x.0", "v1.2.3", "1.2.3-rc.1", "-1.0.0"],
    )
    def test_parse_malformed_raises(self, value: str):
        """Malformed strings fail instead of producing partial versions."""
        with pytest.raises(InvalidVersionError):
            Version.parse(value)

    def test_negative_component_rejected(self):
        """Components must be non-negative integers."""
        with pytest.raises(InvalidVersionError):
            Version(1, -1, 0)

    def test_str(self):
        """str() gives major.minor.patch."""
        assert str(Version(0, 10, 2)) == "0.10.2"

    def test_initial_version(self):
        """The fallback baseline is 0.0.0."""
        assert str(INITIAL_VERSION) == "0.0.0"


class TestVersionBump:
    """Tests for Version.bump()."""

    def test_patch_increments_only_patch(self):
        assert Version(1, 2, 3).bump(BumpType.PATCH) == Version(1, 2, 4)

    def test_minor_keeps_patch(self):
        """A minor bump does not reset the patch component."""
        assert Version(1, 2, 3).bump(BumpType.MINOR) == Version(1, 3, 3)

    def test_major_keeps_lower_components(self):
        """A major bump does not reset minor or patch."""
        assert Version(1, 2, 3).bump(BumpType.MAJOR) == Version(2, 2, 3)

    def test_default_is_patch(self):
        assert Version(1, 2, 3).bump() == Version(1, 2, 4)

    def test_bump_returns_new_instance(self):
        """Versions are immutable."""
        original = Version(1, 0, 0)
        original.bump(BumpType.MAJOR)
        assert original == Version(1, 0, 0)


class TestIncreaseVersion:
    """Tests for increase_version()."""

    def test_increase_by_patch(self):
        assert increase_version("1.0.0", BumpType.PATCH) == "1.0.1"

    def test_increase_by_minor(self):
        assert increase_version("1.0.0", BumpType.MINOR) == "1.1.0"

    def test_increase_by_major(self):
        assert increase_version("1.0.0", BumpType.MAJOR) == "2.0.0"

    def test_unspecified_is_patch(self):
        assert increase_version("1.0.0") == "1.0.1"

    def test_accepts_version_instance(self):
        assert increase_version(Version(3, 1, 4), BumpType.MINOR) == "3.2.4"

    def test_accepts_plain_string_bump(self):
        """BumpType values compare equal to their strings."""
        assert increase_version("1.0.0", "minor") == "1.1.0"

    def test_idempotent(self):
        """Same input, same output."""
        assert increase_version("2.5.9", BumpType.MAJOR) == increase_version(
            "2.5.9", BumpType.MAJOR
        )

    def test_malformed_raises(self):
        with pytest.raises(InvalidVersionError):
            increase_version("1.0.x")
