"""Deploy stage: roll the new version out with the deployer CLI."""

from __future__ import annotations

from rollout.core.result import Err, Ok, Result
from rollout.core.secrets import DEPLOY_SECRETS
from rollout.services.packages import DEPLOYER_BIN, DEPLOYER_PACKAGE
from rollout.services.stage import StageContext, StageError, load_stage_secrets, run_tool


def deploy_commands(ctx: StageContext, *, package: str = DEPLOYER_PACKAGE) -> list[list[str]]:
    return [
        ["npm", "i", package],
        ["npm", "view", package],
        ["npx", "--package", package, DEPLOYER_BIN, ctx.version, str(ctx.descriptor.path)],
    ]


def deploy(ctx: StageContext, *, package: str = DEPLOYER_PACKAGE) -> Result[None, StageError]:
    """Install the pinned deployer and run it against the descriptor.

    The deploy secrets (log shipping, APM keys, registry token) are only
    visible to these child processes. The deployer is a cluster client, so
    it gets the region overlay as well.
    """
    ctx.console.header(f"Deploy {ctx.version} -> {ctx.descriptor.service_name}")

    secrets = load_stage_secrets(ctx, "deploy", DEPLOY_SECRETS)
    if isinstance(secrets, Err):
        return secrets

    env = {**ctx.run_env.cluster_env(), **secrets.value}
    for cmd in deploy_commands(ctx, package=package):
        result = run_tool(ctx, "deploy", cmd, env=env)
        if isinstance(result, Err):
            return result

    return Ok(None)
