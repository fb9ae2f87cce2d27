"""Loading configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_tagger.config.models import ReleaseTaggerConfig
from release_tagger.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_SECTION = "release-tagger"


def find_pyproject_toml(workspace: Path | None = None) -> Path:
    """Find pyproject.toml at the root of ``workspace``.

    Parent directories are not searched: settings outside the checked-out
    repository must not apply to it.

    Raises:
        ConfigNotFoundError: If the workspace has no pyproject.toml
    """
    root = (workspace or Path.cwd()).resolve()
    candidate = root / "pyproject.toml"
    if not candidate.is_file():
        raise ConfigNotFoundError(f"No pyproject.toml found in {root}")
    return candidate


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_tagger_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-tagger]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def load_config(path: Path | None = None) -> ReleaseTaggerConfig:
    """Load configuration for the project at ``path``.

    A missing pyproject.toml or a missing ``[tool.release-tagger]`` table
    gives the defaults, since the repository being tagged need not be a
    Python project.

    Raises:
        ConfigValidationError: If the configuration table is invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        return ReleaseTaggerConfig()

    data = extract_release_tagger_config(load_pyproject_toml(pyproject_path))
    try:
        return ReleaseTaggerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid [tool.{TOOL_SECTION}] in {pyproject_path}:\n{e}"
        ) from e
