"""Command-line interface for release-tagger."""

from __future__ import annotations

from release_tagger.cli.app import app

__all__ = ["app"]
