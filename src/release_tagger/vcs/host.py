"""Repository host interface.

The release cycle only needs four operations from the hosting service.
Implementations (GitHub, in-memory fakes for tests) subclass
:class:`RepositoryHost`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag as listed by the host."""

    name: str
    commit_sha: str


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit as listed by the host."""

    sha: str
    message: str


@dataclass(frozen=True, slots=True)
class CreatedTag:
    """An annotated tag object created on the host."""

    tag: str
    sha: str


@dataclass(frozen=True, slots=True)
class CreatedRef:
    """A git reference created on the host."""

    ref: str
    url: str | None = None


class RepositoryHost(ABC):
    """Abstract interface for the hosting service of a repository.

    ``repo`` is always the ``owner/name`` slug.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    async def list_tags(self, repo: str, *, per_page: int = 100) -> list[Tag]:
        """List tags, most recent first.

        Args:
            repo: Repository slug
            per_page: Maximum number of tags to fetch

        Returns:
            Tags in the order the host returns them

        Raises:
            HostError: If the request fails
        """
        ...

    @abstractmethod
    async def list_commits(self, repo: str, since_sha: str | None = None) -> list[Commit]:
        """List commits reachable from ``since_sha`` (or the default branch).

        Args:
            repo: Repository slug
            since_sha: Commit to start listing from

        Returns:
            Commits, newest first

        Raises:
            HostError: If the request fails
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    async def create_tag(
        self,
        repo: str,
        name: str,
        message: str,
        target_sha: str,
    ) -> CreatedTag:
        """Create an annotated tag object pointing at a commit.

        Raises:
            HostError: If the request fails
        """
        ...

    @abstractmethod
    async def create_ref(self, repo: str, ref: str, sha: str) -> CreatedRef:
        """Create a reference (e.g. ``refs/tags/v1.0.0``) pointing at ``sha``.

        Raises:
            HostError: If the request fails, including when the ref exists
        """
        ...
