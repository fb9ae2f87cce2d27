"""Conventional commit classification.

Only two things in a commit message matter here: a breaking-change
marker (``type!:`` or ``type(scope)!:``) and a leading ``feat`` token.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from release_tagger.core.version import BumpType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from release_tagger.vcs.host import Commit

# type, optional (scope), then "!: " and a description
BREAKING_CHANGE_PATTERN = re.compile(r"^(\w+)(\([^)]+\))?!: .+", re.ASCII)

MINOR_PREFIX = "feat"


def is_breaking_change(message: str) -> bool:
    """Check whether a commit message carries the ``!`` breaking-change marker.

    Examples:
        >>> is_breaking_change("feat(api)!: drop v1 endpoints")
        True
        >>> is_breaking_change("fix(api): handle null response")
        False
    """
    return BREAKING_CHANGE_PATTERN.match(message) is not None


def detect_change_type(messages: Iterable[str]) -> BumpType:
    """Classify a sequence of commit messages.

    Messages are scanned in the order given and the first one that
    signals something wins: a breaking change means MAJOR, a message
    starting with ``feat`` means MINOR. The prefix check is
    case-sensitive and has no word boundary, so ``feature:`` counts too.

    Args:
        messages: Commit messages, in the order the host delivered them

    Returns:
        The detected BumpType, PATCH when nothing matched
    """
    for message in messages:
        if is_breaking_change(message):
            return BumpType.MAJOR
        if message.startswith(MINOR_PREFIX):
            return BumpType.MINOR
    return BumpType.PATCH


def commit_messages(commits: Iterable[Commit]) -> list[str]:
    """Extract messages from commits, keeping their order."""
    return [commit.message for commit in commits]
