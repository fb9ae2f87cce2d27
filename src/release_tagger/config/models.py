"""Configuration models.

``ReleaseTaggerConfig`` holds project settings from ``[tool.release-tagger]``
in pyproject.toml. ``RunContext`` holds per-run values taken from the
environment of the CI job (workspace, token, commit sha, ...).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from release_tagger.exceptions import PreconditionError


class VersionConfig(BaseModel):
    """Version and tag naming settings."""

    model_config = ConfigDict(extra="forbid")

    tag_prefix: str = Field(default="v", description="Prefix prepended to versions in tag names")
    tag_message: str = Field(
        default="Version {version}",
        description="Annotated tag message; {version} and {tag} are substituted",
    )
    update_manifests: bool = Field(
        default=True,
        description="Write the new version into package manifests after tagging",
    )

    @field_validator("tag_message")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        try:
            value.format(version="0.0.0", tag="v0.0.0")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"invalid tag_message template: {e}") from e
        return value


class GitHubConfig(BaseModel):
    """GitHub API settings."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = Field(default="https://api.github.com")
    timeout_seconds: float = Field(default=30.0, gt=0)
    tags_per_page: int = Field(default=100, ge=1, le=100)


class ReleaseTaggerConfig(BaseModel):
    """Root configuration, read from ``[tool.release-tagger]``."""

    model_config = ConfigDict(extra="forbid")

    version: VersionConfig = Field(default_factory=VersionConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)

    @property
    def tag_prefix(self) -> str:
        return self.version.tag_prefix


class RunContext(BaseSettings):
    """Environment of a single release run.

    Values come from the variables GitHub Actions exports. Missing values
    are allowed at construction time; :meth:`check_preconditions` reports
    them before the repository host is contacted.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
        env_ignore_empty=True,
        populate_by_name=True,
    )

    workspace: Path | None = Field(default=None, validation_alias="GITHUB_WORKSPACE")
    token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "INPUT_GITHUB_TOKEN"),
        repr=False,
    )
    repository: str | None = Field(default=None, validation_alias="GITHUB_REPOSITORY")
    sha: str | None = Field(default=None, validation_alias="GITHUB_SHA")
    dry_run: bool = Field(default=False, validation_alias="INPUT_DRY_RUN")
    package_root: str | None = Field(default=None, validation_alias="INPUT_PACKAGE_ROOT")
    output_file: Path | None = Field(default=None, validation_alias="GITHUB_OUTPUT")
    api_url: str | None = Field(default=None, validation_alias="GITHUB_API_URL")

    @property
    def manifest_root(self) -> Path | None:
        if self.workspace is None:
            return None
        return self.workspace / (self.package_root or "")

    def check_preconditions(self) -> None:
        """Fail fast when required context is missing.

        Raises:
            PreconditionError: Naming the first missing value
        """
        if self.workspace is None or not self.workspace.is_dir():
            raise PreconditionError("No GITHUB_WORKSPACE provided")
        if not self.token:
            raise PreconditionError("Invalid or missing GITHUB_TOKEN.")
        if not self.repository or "/" not in self.repository:
            raise PreconditionError("No GITHUB_REPOSITORY provided")
        if not self.dry_run and not self.sha:
            raise PreconditionError("No GITHUB_SHA provided")
