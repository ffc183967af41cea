from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from rollout.cli.context import CLIContext, build_context, exit_with
from rollout.core.config import ConfigError, DeployDescriptor, RunEnvironment, load_descriptor
from rollout.core.errors import ErrorCode
from rollout.core.result import Err
from rollout.core.secrets import find_version
from rollout.output.console import Style
from rollout.services.notify import NoPreviousPolicy
from rollout.services.packages import DEPLOYER_PACKAGE
from rollout.services.pipeline import DeployPipeline
from rollout.services.stage import StageContext, StageError

# GitHub exposes action inputs as INPUT_<NAME> with the name upper-cased.
DEPLOY_FILE_ENVVAR = "INPUT_DEPLOY-FILE"


def deploy(
    deploy_file: Path = typer.Option(
        ...,
        "--deploy-file",
        envvar=DEPLOY_FILE_ENVVAR,
        help="Deploy descriptor (JSON or TOML) naming the service and cluster.",
    ),
    workdir: Path | None = typer.Option(
        None, "--workdir", help="Checkout root (defaults to the current directory)."
    ),
    secrets_dir: Path | None = typer.Option(
        None, "--secrets-dir", help="Directory holding SECRET_*.txt files (defaults to workdir)."
    ),
    no_previous: str = typer.Option(
        "skip",
        "--no-previous",
        help="When no earlier release tag exists: 'skip' the notification or use 'empty-tree'.",
    ),
    deployer_package: str = typer.Option(
        DEPLOYER_PACKAGE, "--deployer-package", help="npm package providing the deployer."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print commands without running them."),
) -> None:
    """Deploy the built version, wait until stable, then notify."""
    ctx = build_context(workdir)
    run_deploy(
        ctx,
        deploy_file=deploy_file,
        secrets_dir=secrets_dir,
        no_previous=no_previous,
        deployer_package=deployer_package,
        dry_run=dry_run,
    )


def run_deploy(
    ctx: CLIContext,
    *,
    deploy_file: Path,
    secrets_dir: Path | None = None,
    no_previous: str = "skip",
    deployer_package: str = DEPLOYER_PACKAGE,
    dry_run: bool = False,
) -> None:
    policy = _policy(ctx, no_previous)

    run_env = RunEnvironment.from_environ(ctx.environ)
    if isinstance(run_env, Err):
        _exit_config(ctx, run_env.error)

    descriptor_path = deploy_file if deploy_file.is_absolute() else ctx.workdir / deploy_file
    loaded = load_descriptor(descriptor_path)
    if isinstance(loaded, Err):
        _exit_config(ctx, loaded.error)
    # Keep the path as the operator wrote it: it doubles as the environment label.
    descriptor = DeployDescriptor(
        path=deploy_file,
        service_name=loaded.value.service_name,
        cluster=loaded.value.cluster,
    )

    version = find_version(ctx.workdir)
    if isinstance(version, Err):
        exit_with(ctx, version.error.message, code=ErrorCode.IO_ERROR)

    console = ctx.console
    console.print(f"repository: {run_env.value.repository_name}", Style.DIM)
    console.print(f"version: {version.value}", Style.DIM)
    console.print(f"service: {descriptor.service_name} (cluster {descriptor.cluster})", Style.DIM)

    stage_ctx = StageContext(
        workdir=ctx.workdir,
        secrets_dir=ctx.workdir / secrets_dir if secrets_dir else ctx.workdir,
        run_env=run_env.value,
        descriptor=descriptor,
        version=version.value,
        console=console,
        dry_run=dry_run,
    )
    pipeline = DeployPipeline(
        stage_ctx, on_no_previous=policy, deployer_package=deployer_package
    )
    result = pipeline.run()
    if isinstance(result, Err):
        exit_with(ctx, str(result.error), code=stage_error_code(result.error), hint=result.error.hint)

    console.success(f"rollout of {version.value} complete")


def stage_error_code(error: StageError) -> ErrorCode:
    if error.kind in {"secret_missing", "secret_unreadable"}:
        return ErrorCode.IO_ERROR
    if error.stage == "wait":
        return ErrorCode.WAIT_ERROR
    return ErrorCode.DEPLOY_ERROR


def _exit_config(ctx: CLIContext, error: ConfigError) -> NoReturn:
    code = ErrorCode.ENV_ERROR if error.kind == "env_missing" else ErrorCode.USER_ERROR
    exit_with(ctx, error.message, code=code, hint=error.hint)


def _policy(ctx: CLIContext, value: str) -> NoPreviousPolicy:
    match value:
        case "skip":
            return "skip"
        case "empty-tree":
            return "empty-tree"
        case _:
            exit_with(
                ctx,
                f"invalid --no-previous: {value}",
                code=ErrorCode.USER_ERROR,
                hint="expected 'skip' or 'empty-tree'",
            )
