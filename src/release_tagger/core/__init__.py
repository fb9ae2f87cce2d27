"""Core business logic for release-tagger.

This module contains the fundamental building blocks:
- Version parsing and increments
- Conventional commit classification
- Tag naming and collision avoidance
- Release orchestration
"""

from __future__ import annotations

from release_tagger.core.commits import detect_change_type, is_breaking_change
from release_tagger.core.release import ReleaseResult, ReleaseTagger
from release_tagger.core.tags import get_tag_name, next_free_version, strip_tag_prefix
from release_tagger.core.version import (
    INITIAL_VERSION,
    BumpType,
    Version,
    increase_version,
    parse_version,
)

__all__ = [
    "INITIAL_VERSION",
    "BumpType",
    "ReleaseResult",
    "ReleaseTagger",
    "Version",
    "detect_change_type",
    "get_tag_name",
    "increase_version",
    "is_breaking_change",
    "next_free_version",
    "parse_version",
    "strip_tag_prefix",
]
