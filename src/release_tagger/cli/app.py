"""Command-line entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from release_tagger import __version__
from release_tagger.cli.commands.tag import run_tag

app = typer.Typer(
    name="release-tagger",
    help="Create the next semantic version tag from conventional commits.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"release-tagger {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """release-tagger: semantic version tags for GitHub repositories."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def tag(
    path: Optional[str] = typer.Option(
        None, "--path", help="Workspace directory (defaults to GITHUB_WORKSPACE)."
    ),
    dry_run: Optional[bool] = typer.Option(
        None,
        "--dry-run/--execute",
        help="Compute the version without creating anything (defaults to INPUT_DRY_RUN).",
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Tag prefix (default 'v')."),
) -> None:
    """Compute the next version and tag the current commit."""
    run_tag(path, dry_run, prefix, console, err_console)
