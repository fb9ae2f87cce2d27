"""Configuration management for release-tagger."""

from __future__ import annotations

from release_tagger.config.loader import load_config
from release_tagger.config.models import (
    GitHubConfig,
    ReleaseTaggerConfig,
    RunContext,
    VersionConfig,
)

__all__ = [
    "GitHubConfig",
    "ReleaseTaggerConfig",
    "RunContext",
    "VersionConfig",
    "load_config",
]
