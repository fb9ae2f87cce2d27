"""Package manifest version updates.

After a tag is created the new version is written back into the
manifests found in the package root: ``package.json``,
``package-lock.json`` and ``pyproject.toml``.

pyproject.toml is edited with a targeted regex replacement instead of
a TOML round-trip so formatting and comments survive.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from release_tagger.exceptions import ProjectError, VersionNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
PACKAGE_LOCK_JSON = "package-lock.json"
PYPROJECT_TOML = "pyproject.toml"

# Sections that may hold a static version, in lookup order
_PYPROJECT_SECTIONS = (r"\[project\]", r"\[tool\.poetry\]")
_VERSION_LINE = re.compile(r'^(version\s*=\s*)["\']([^"\']+)["\']', re.MULTILINE)


def _section_pattern(header: str) -> re.Pattern[str]:
    # A section runs from its header to the next header or EOF
    return re.compile(rf"^{header}[ \t]*$.*?(?=^\[|\Z)", re.MULTILINE | re.DOTALL)


def get_pyproject_version(path: Path) -> str:
    """Get the static version from a pyproject.toml.

    Raises:
        VersionNotFoundError: If neither [project] nor [tool.poetry] sets a version
    """
    content = _read(path)
    for header in _PYPROJECT_SECTIONS:
        section = _section_pattern(header).search(content)
        if section:
            match = _VERSION_LINE.search(section.group(0))
            if match:
                return match.group(2)
    raise VersionNotFoundError(
        f"Could not find version in {path}. Expected [project].version or [tool.poetry].version."
    )


def update_pyproject_version(path: Path, new_version: str) -> Path:
    """Set the version in a pyproject.toml, keeping the rest of the file intact.

    Raises:
        VersionNotFoundError: If no static version is declared
    """
    content = _read(path)
    for header in _PYPROJECT_SECTIONS:
        pattern = _section_pattern(header)
        section = pattern.search(content)
        if not section or not _VERSION_LINE.search(section.group(0)):
            continue
        updated_section = _VERSION_LINE.sub(
            rf'\g<1>"{new_version}"', section.group(0), count=1
        )
        content = content[: section.start()] + updated_section + content[section.end() :]
        _write(path, content)
        return path

    raise VersionNotFoundError(
        f"Could not find version to update in {path}. "
        "Expected [project].version or [tool.poetry].version."
    )


def update_package_json(path: Path, new_version: str) -> Path:
    """Set ``version`` in package.json."""
    data = _load_json(path)
    data["version"] = new_version
    _write(path, json.dumps(data, indent=2))
    return path


def update_package_lock(path: Path, new_version: str) -> Path:
    """Set the root package version in package-lock.json."""
    data = _load_json(path)
    data["version"] = new_version
    root_package = data.get("packages", {}).get("")
    if isinstance(root_package, dict):
        root_package["version"] = new_version
    _write(path, json.dumps(data, indent=2))
    return path


def find_manifests(root: Path) -> list[Path]:
    """List the manifests under ``root`` whose version can be updated."""
    found: list[Path] = []
    for name in (PACKAGE_JSON, PACKAGE_LOCK_JSON):
        if (root / name).is_file():
            found.append(root / name)

    pyproject = root / PYPROJECT_TOML
    if pyproject.is_file():
        try:
            get_pyproject_version(pyproject)
        except VersionNotFoundError:
            logger.debug("Skipping %s: no static version", pyproject)
        else:
            found.append(pyproject)
    return found


def update_manifests(root: Path, new_version: str, *, dry_run: bool = False) -> list[Path]:
    """Write ``new_version`` into every manifest found under ``root``.

    Args:
        root: Package root directory
        new_version: Version string to write
        dry_run: Only report which files would change

    Returns:
        Paths of the updated (or, in dry run, updatable) manifests

    Raises:
        ProjectError: If a manifest cannot be read or written
    """
    manifests = find_manifests(root)
    if dry_run:
        for path in manifests:
            logger.debug("Would update %s version to %s", path.name, new_version)
        return manifests

    updaters = {
        PACKAGE_JSON: update_package_json,
        PACKAGE_LOCK_JSON: update_package_lock,
        PYPROJECT_TOML: update_pyproject_version,
    }
    for path in manifests:
        updaters[path.name](path, new_version)
        logger.warning("Updated %s version to %s", path.name, new_version)
    return manifests


def _load_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(_read(path))
    except json.JSONDecodeError as e:
        raise ProjectError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ProjectError(f"Expected a JSON object in {path}")
    return data


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Could not read {path}: {e}") from e


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Could not write {path}: {e}") from e
