"""Shared fixtures for release-tagger tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from release_tagger.config.models import ReleaseTaggerConfig, RunContext
from release_tagger.exceptions import HostError
from release_tagger.vcs.host import Commit, CreatedRef, CreatedTag, RepositoryHost, Tag

if TYPE_CHECKING:
    from pathlib import Path

RUN_ENV_VARS = (
    "GITHUB_WORKSPACE",
    "GITHUB_TOKEN",
    "INPUT_GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_SHA",
    "INPUT_DRY_RUN",
    "INPUT_PACKAGE_ROOT",
    "GITHUB_OUTPUT",
    "GITHUB_API_URL",
)


class FakeHost(RepositoryHost):
    """In-memory repository host that records every call."""

    def __init__(
        self,
        tags: list[Tag] | None = None,
        commits: list[Commit] | None = None,
    ) -> None:
        self.tags = list(tags or [])
        self.commits = list(commits or [])
        self.calls: list[tuple] = []
        self.created_tags: list[tuple[str, str, str]] = []
        self.created_refs: list[tuple[str, str]] = []
        self.fail_on: dict[str, HostError] = {}

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise self.fail_on[name]

    async def list_tags(self, repo: str, *, per_page: int = 100) -> list[Tag]:
        self._record("list_tags", repo)
        return self.tags[:per_page]

    async def list_commits(self, repo: str, since_sha: str | None = None) -> list[Commit]:
        self._record("list_commits", repo, since_sha)
        return self.commits

    async def create_tag(
        self,
        repo: str,
        name: str,
        message: str,
        target_sha: str,
    ) -> CreatedTag:
        self._record("create_tag", repo, name)
        self.created_tags.append((name, message, target_sha))
        return CreatedTag(tag=name, sha=f"tagobj-{name}")

    async def create_ref(self, repo: str, ref: str, sha: str) -> CreatedRef:
        self._record("create_ref", repo, ref)
        self.created_refs.append((ref, sha))
        return CreatedRef(ref=ref, url=f"https://api.github.com/repos/{repo}/git/{ref}")


@pytest.fixture(autouse=True)
def clean_run_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CI variables of the machine running the tests out of RunContext."""
    for name in RUN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty workspace directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def run_context(workspace: Path) -> RunContext:
    """A complete run context for a non-dry run."""
    return RunContext(
        workspace=workspace,
        token="ghp_test",
        repository="octo/widgets",
        sha="abc123",
    )


@pytest.fixture
def config() -> ReleaseTaggerConfig:
    return ReleaseTaggerConfig()


@pytest.fixture
def make_host() -> type[FakeHost]:
    """The FakeHost class, for tests that need their own tags and commits."""
    return FakeHost


@pytest.fixture
def fake_host() -> FakeHost:
    """A host with two tags and a patch-level history."""
    return FakeHost(
        tags=[Tag("v1.2.0", "sha-120"), Tag("v1.1.0", "sha-110")],
        commits=[Commit("c2", "fix: handle empty input"), Commit("c1", "chore: tidy")],
    )


@pytest.fixture
def temp_project_with_pyproject(tmp_path: Path) -> Path:
    """A project directory with a pyproject.toml carrying release-tagger config."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.release-tagger.version]
tag_prefix = "release-"

[tool.release-tagger.github]
tags_per_page = 50
"""
    )
    return project
