from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from rollout.core.config import DeployDescriptor, RunEnvironment
from rollout.core.result import Err, Ok, Result
from rollout.core.secrets import SecretError, SecretSet
from rollout.output.console import ConsoleProtocol, Style
from rollout.platform.process import ProcessError, child_env, run_streaming

StageName = Literal["deploy", "wait", "notify"]


@dataclass(frozen=True, slots=True)
class StageError:
    stage: StageName
    kind: Literal[
        "secret_missing",
        "secret_unreadable",
        "tool_failed",
        "tag_lookup_failed",
    ]
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        return f"{self.stage} failed: {self.message}"


@dataclass(frozen=True, slots=True)
class StageContext:
    """Everything a stage needs, passed explicitly.

    Attributes:
        workdir: Checkout root; external tools and git run here.
        secrets_dir: Directory holding SECRET_*.txt files.
        run_env: Repository name and region.
        descriptor: Parsed deploy descriptor.
        version: Version identifier being rolled out.
        console: Output sink.
        dry_run: Print commands instead of running them.
    """

    workdir: Path
    secrets_dir: Path
    run_env: RunEnvironment
    descriptor: DeployDescriptor
    version: str
    console: ConsoleProtocol
    dry_run: bool = False


def load_stage_secrets(
    ctx: StageContext, stage: StageName, secrets: SecretSet
) -> Result[dict[str, str], StageError]:
    match secrets.load(ctx.secrets_dir):
        case Ok(env):
            return Ok(env)
        case Err(error):
            return Err(_secret_error(stage, error))


def _secret_error(stage: StageName, error: SecretError) -> StageError:
    if error.kind == "not_found":
        return StageError(
            stage=stage,
            kind="secret_missing",
            message=error.message,
            hint="Check that the job provisions every SECRET_*.txt file before this step",
        )
    return StageError(stage=stage, kind="secret_unreadable", message=error.message)


def run_tool(
    ctx: StageContext,
    stage: StageName,
    cmd: list[str],
    *,
    env: dict[str, str] | None = None,
) -> Result[None, StageError]:
    """Run one external tool for a stage, output streamed to the log."""
    ctx.console.print(f"$ {shlex.join(cmd)}", Style.DIM)
    if ctx.dry_run:
        return Ok(None)

    result = run_streaming(cmd, cwd=ctx.workdir, env=child_env(env))
    return result.map_err(lambda e: _tool_error(stage, e))


def _tool_error(stage: StageName, error: ProcessError) -> StageError:
    return StageError(
        stage=stage,
        kind="tool_failed",
        message=str(error),
        hint=error.stderr.strip() or None,
    )
