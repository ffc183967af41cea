from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn

import typer

from rollout.core.errors import ErrorCode
from rollout.output.console import ConsoleProtocol, RichConsole, Style


def _environ() -> dict[str, str]:
    return dict(os.environ)


@dataclass(frozen=True, slots=True)
class CLIContext:
    workdir: Path
    console: ConsoleProtocol
    environ: Mapping[str, str] = field(default_factory=_environ)


def build_context(workdir: Path | None = None) -> CLIContext:
    root = (workdir or Path.cwd()).expanduser().resolve()
    if not root.is_dir():
        typer.echo(f"error: --workdir '{root}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    return CLIContext(workdir=root, console=RichConsole())


def exit_with(
    ctx: CLIContext, message: str, *, code: ErrorCode, hint: str | None = None
) -> NoReturn:
    ctx.console.error(message)
    if hint:
        ctx.console.print(f"hint: {hint}", Style.DIM)
    raise typer.Exit(code=int(code))
