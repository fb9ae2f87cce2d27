"""Release orchestration.

One call to :meth:`ReleaseTagger.run` performs a full tagging cycle:

1. List existing tags; the first one returned is the baseline
2. List commits reachable from the baseline tag
3. Classify the commits and bump the baseline
4. Skip over versions whose tag name already exists
5. Create the annotated tag and its ref (unless dry run)
6. Write the new version into package manifests

Host calls are awaited one after the other. Nothing is retried: if the
ref creation loses a race with a concurrent run, the run fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from release_tagger.core.commits import commit_messages, detect_change_type
from release_tagger.core.tags import get_tag_name, next_free_version, strip_tag_prefix
from release_tagger.core.version import INITIAL_VERSION, BumpType, Version
from release_tagger.exceptions import HostError, PreconditionError
from release_tagger.project.manifest import update_manifests

if TYPE_CHECKING:
    from pathlib import Path

    from release_tagger.config.models import ReleaseTaggerConfig, RunContext
    from release_tagger.vcs.host import RepositoryHost, Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReleaseResult:
    """Outcome of a release run."""

    previous_version: Version
    version: Version
    tag_name: str
    bump_type: BumpType
    dry_run: bool
    tag_sha: str | None = None
    ref: str | None = None
    updated_files: list[Path] = field(default_factory=list)

    @property
    def outputs(self) -> dict[str, str]:
        """Values exported to the CI job."""
        return {"version": str(self.version), "tagname": self.tag_name}


class ReleaseTagger:
    """Drives one release-tagging cycle against a repository host."""

    def __init__(
        self,
        host: RepositoryHost,
        context: RunContext,
        config: ReleaseTaggerConfig,
    ) -> None:
        self.host = host
        self.context = context
        self.config = config

    @property
    def prefix(self) -> str:
        return self.config.version.tag_prefix

    async def run(self) -> ReleaseResult:
        """Compute the next version and tag the current commit.

        Returns:
            The computed version, tag name and what was created

        Raises:
            PreconditionError: If workspace, token, repository or sha is missing
            HostError: If listing commits or creating the tag/ref fails
            InvalidVersionError: If the latest tag is not a valid version
            ProjectError: If a manifest cannot be updated
        """
        self.context.check_preconditions()
        repo = self.context.repository
        if repo is None:
            raise PreconditionError("No GITHUB_REPOSITORY provided")

        tags = await self._list_tags(repo)
        latest_tag = tags[0] if tags else None
        previous = self._baseline(latest_tag)
        logger.debug("Detected current version %s", previous)

        commits = await self.host.list_commits(
            repo, latest_tag.commit_sha if latest_tag else None
        )
        bump_type = detect_change_type(commit_messages(commits))
        logger.debug("Detected change-type of %s from %d commits", bump_type, len(commits))

        existing = {tag.name for tag in tags}
        version = next_free_version(previous.bump(bump_type), bump_type, existing, self.prefix)
        tag_name = get_tag_name(version, self.prefix)
        logger.debug("Detected next version %s (tag %s)", version, tag_name)

        if self.context.dry_run:
            return ReleaseResult(
                previous_version=previous,
                version=version,
                tag_name=tag_name,
                bump_type=bump_type,
                dry_run=True,
                updated_files=self._update_manifests(version, dry_run=True),
            )

        sha = self.context.sha
        if sha is None:
            raise PreconditionError("No GITHUB_SHA provided")
        message = self.config.version.tag_message.format(version=version, tag=tag_name)
        created_tag = await self.host.create_tag(repo, tag_name, message, sha)
        logger.warning("Created new tag: %s", created_tag.tag)

        created_ref = await self.host.create_ref(
            repo, f"refs/tags/{created_tag.tag}", created_tag.sha
        )
        logger.warning("Reference %s available at %s", created_ref.ref, created_ref.url)

        return ReleaseResult(
            previous_version=previous,
            version=version,
            tag_name=tag_name,
            bump_type=bump_type,
            dry_run=False,
            tag_sha=created_tag.sha,
            ref=created_ref.ref,
            updated_files=self._update_manifests(version, dry_run=False),
        )

    async def _list_tags(self, repo: str) -> list[Tag]:
        # Brand-new repositories may fail here; they are treated as untagged
        try:
            return await self.host.list_tags(repo, per_page=self.config.github.tags_per_page)
        except HostError as e:
            logger.warning("Could not list tags, assuming none exist: %s", e)
            return []

    def _baseline(self, latest_tag: Tag | None) -> Version:
        if latest_tag is None:
            return INITIAL_VERSION
        return Version.parse(strip_tag_prefix(latest_tag.name, self.prefix))

    def _update_manifests(self, version: Version, *, dry_run: bool) -> list[Path]:
        root = self.context.manifest_root
        if not self.config.version.update_manifests or root is None:
            return []
        return update_manifests(root, str(version), dry_run=dry_run)
