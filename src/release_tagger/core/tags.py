"""Tag naming."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

    from release_tagger.core.version import BumpType, Version

logger = logging.getLogger(__name__)

DEFAULT_TAG_PREFIX = "v"


def get_tag_name(version: Version | str, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Format a version as a tag name, e.g. ``v1.0.0``."""
    return f"{prefix}{version}"


def strip_tag_prefix(name: str, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Remove the tag prefix from a tag name.

    The prefix is compared case-insensitively, so ``V1.2.0`` and
    ``v1.2.0`` both give ``1.2.0``. Names without the prefix are
    returned unchanged.
    """
    if prefix and name.lower().startswith(prefix.lower()):
        return name[len(prefix) :]
    return name


def next_free_version(
    version: Version,
    bump_type: BumpType,
    existing_names: Collection[str],
    prefix: str = DEFAULT_TAG_PREFIX,
) -> Version:
    """Bump a candidate version until its tag name is not taken.

    Each step applies ``bump_type`` to the previous candidate, so the
    relevant component strictly increases and the loop ends once it
    passes every existing tag.

    Args:
        version: First candidate version
        bump_type: Increment applied on each collision
        existing_names: Tag names that already exist
        prefix: Tag prefix used to build names

    Returns:
        The first candidate whose tag name is free
    """
    candidate = version
    while (name := get_tag_name(candidate, prefix)) in existing_names:
        logger.debug("Tag %s already exists, trying next version", name)
        candidate = candidate.bump(bump_type)
    return candidate
