"""Exception hierarchy for release-tagger.

Every error raised on purpose derives from :class:`ReleaseTaggerError`,
so the CLI can report any failure as a single message.
"""

from __future__ import annotations


class ReleaseTaggerError(Exception):
    """Base class for all release-tagger errors."""


# Configuration


class ConfigError(ReleaseTaggerError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


class PreconditionError(ReleaseTaggerError):
    """Required run context is missing (workspace, token, repository, sha)."""


# Versions


class VersionError(ReleaseTaggerError):
    """Base class for version errors."""


class InvalidVersionError(VersionError):
    """A version string is not a plain ``major.minor.patch`` triple."""


# Repository host


class HostError(ReleaseTaggerError):
    """A call to the repository host failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# Project files


class ProjectError(ReleaseTaggerError):
    """A project manifest could not be read or updated."""


class VersionNotFoundError(ProjectError):
    """No version field was found in a manifest."""
