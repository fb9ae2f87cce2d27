"""Project manifest handling."""

from __future__ import annotations

from release_tagger.project.manifest import (
    find_manifests,
    get_pyproject_version,
    update_manifests,
    update_package_json,
    update_package_lock,
    update_pyproject_version,
)

__all__ = [
    "find_manifests",
    "get_pyproject_version",
    "update_manifests",
    "update_package_json",
    "update_package_lock",
    "update_pyproject_version",
]
