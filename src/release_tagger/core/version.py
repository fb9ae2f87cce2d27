"""Semantic version triples and how they are increased.

Increments never reset lower components: a major bump of ``1.2.3``
yields ``2.2.3`` and a minor bump yields ``1.3.3``. Tags created by
earlier releases depend on this, so it is kept as is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from release_tagger.exceptions import InvalidVersionError

VERSION_PATTERN = re.compile(r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)$")


class BumpType(StrEnum):
    """Magnitude of a change, ordered by impact."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def rank(self) -> int:
        return _BUMP_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BumpType):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BumpType):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BumpType):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BumpType):
            return NotImplemented
        return self.rank >= other.rank


_BUMP_RANKS = {BumpType.PATCH: 0, BumpType.MINOR: 1, BumpType.MAJOR: 2}


@dataclass(frozen=True, order=True)
class Version:
    """An immutable ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionError(
                    f"Version component {name} must be a non-negative integer, got {value!r}"
                )

    @classmethod
    def parse(cls, version: str) -> Version:
        """Parse a version string such as ``1.4.2``.

        Args:
            version: Version string without any tag prefix

        Returns:
            Parsed Version

        Raises:
            InvalidVersionError: If the string is not three dot-separated integers
        """
        match = VERSION_PATTERN.match(version.strip())
        if not match:
            raise InvalidVersionError(
                f"Malformed version {version!r}: expected MAJOR.MINOR.PATCH"
            )
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
        )

    def bump(self, bump_type: BumpType = BumpType.PATCH) -> Version:
        """Return a new version with one component incremented."""
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, self.minor, self.patch)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, self.patch)
        return Version(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


# Baseline when a repository has no tags yet
INITIAL_VERSION = Version(0, 0, 0)


def parse_version(version: str) -> Version:
    """Parse a version string. Shorthand for :meth:`Version.parse`."""
    return Version.parse(version)


def increase_version(
    current: str | Version,
    bump_type: BumpType = BumpType.PATCH,
) -> str:
    """Increase a version and return it as a string.

    Args:
        current: Current version, as a string or Version
        bump_type: Component to increment (defaults to patch)

    Returns:
        The increased version string
    """
    version = current if isinstance(current, Version) else Version.parse(current)
    return str(version.bump(bump_type))
