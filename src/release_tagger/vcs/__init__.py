"""Repository host access."""

from __future__ import annotations

from release_tagger.vcs.github import GitHubHost, build_async_client
from release_tagger.vcs.host import Commit, CreatedRef, CreatedTag, RepositoryHost, Tag

__all__ = [
    "Commit",
    "CreatedRef",
    "CreatedTag",
    "GitHubHost",
    "RepositoryHost",
    "Tag",
    "build_async_client",
]
