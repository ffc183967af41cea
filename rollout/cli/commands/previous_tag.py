from __future__ import annotations

from pathlib import Path

import typer

from rollout.cli.context import CLIContext, build_context, exit_with
from rollout.core.errors import ErrorCode
from rollout.core.result import Err
from rollout.git.repository import Repository
from rollout.git.tags import NoPreviousRelease, PreviousRelease, resolve_previous_tag


def previous_tag(
    current: str | None = typer.Option(
        None, "--current", help="Tag of the release being shipped (defaults to the newest v* tag)."
    ),
    workdir: Path | None = typer.Option(None, "--workdir", help="Repository root."),
) -> None:
    """Print the release tag preceding the current one."""
    show_previous_tag(build_context(workdir), current=current)


def show_previous_tag(ctx: CLIContext, *, current: str | None = None) -> None:
    tags = Repository(ctx.workdir).tags()
    if isinstance(tags, Err):
        exit_with(ctx, tags.error.message, code=ErrorCode.ENV_ERROR)

    match resolve_previous_tag(tags.value, current=current):
        case PreviousRelease(previous=previous):
            typer.echo(previous)
        case NoPreviousRelease(reason=reason):
            ctx.console.warning(f"no previous release: {reason}")
