"""Implementation of the 'tag' command.

The tag command computes the next version from commits since the last
tag and creates the new tag on the repository host.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError
from rich.panel import Panel

from release_tagger.config import ReleaseTaggerConfig, RunContext, load_config
from release_tagger.core.release import ReleaseResult, ReleaseTagger
from release_tagger.exceptions import PreconditionError, ReleaseTaggerError
from release_tagger.vcs.github import GitHubHost, build_async_client

if TYPE_CHECKING:
    from rich.console import Console


def run_tag(
    path: str | None,
    dry_run: bool | None,
    prefix: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the tag command.

    Args:
        path: Optional workspace directory, overrides GITHUB_WORKSPACE
        dry_run: Optional dry-run switch, overrides INPUT_DRY_RUN
        prefix: Optional tag prefix, overrides the configured one
        console: Console for standard output
        err_console: Console for error output
    """
    # Read run context from the environment
    try:
        context = RunContext()
    except ValidationError as e:
        err_console.print(f"[red]Invalid environment:[/] {e}")
        raise SystemExit(1) from e

    overrides: dict[str, object] = {}
    if path:
        overrides["workspace"] = Path(path)
    if dry_run is not None:
        overrides["dry_run"] = dry_run
    if overrides:
        context = context.model_copy(update=overrides)

    try:
        context.check_preconditions()
        config = load_config(context.workspace)
    except ReleaseTaggerError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if prefix is not None:
        config = config.model_copy(
            update={"version": config.version.model_copy(update={"tag_prefix": prefix})}
        )

    try:
        result = asyncio.run(_release(context, config))
    except ReleaseTaggerError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    _print_result(result, console)

    if context.output_file is not None:
        _write_outputs(context.output_file, result.outputs)


async def _release(context: RunContext, config: ReleaseTaggerConfig) -> ReleaseResult:
    if not context.token:
        raise PreconditionError("Invalid or missing GITHUB_TOKEN.")
    api_url = context.api_url or config.github.api_url
    async with build_async_client(
        context.token,
        api_url=api_url,
        timeout=config.github.timeout_seconds,
    ) as client:
        return await ReleaseTagger(GitHubHost(client), context, config).run()


def _print_result(result: ReleaseResult, console: Console) -> None:
    mode_str = "[yellow]DRY-RUN[/]" if result.dry_run else "[green]EXECUTED[/]"
    lines = [
        f"Previous version: [cyan]{result.previous_version}[/]",
        f"Change type:      [cyan]{result.bump_type}[/]",
        f"Next version:     [green]{result.version}[/]",
        f"Tag:              [green]{result.tag_name}[/]",
    ]
    if result.ref:
        lines.append(f"Ref:              [cyan]{result.ref}[/]")
    if result.updated_files:
        verb = "Would update" if result.dry_run else "Updated"
        names = ", ".join(p.name for p in result.updated_files)
        lines.append(f"{verb}:     [cyan]{names}[/]")

    console.print(
        Panel(
            "\n".join(lines),
            title=f"{mode_str} release tag",
            border_style="yellow" if result.dry_run else "green",
        )
    )


def _write_outputs(output_file: Path, outputs: dict[str, str]) -> None:
    """Append ``name=value`` lines to the GitHub Actions output file."""
    with output_file.open("a", encoding="utf-8") as fh:
        for name, value in outputs.items():
            fh.write(f"{name}={value}\n")
