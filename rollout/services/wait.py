"""Wait stage: block until the cluster reports the service stable."""

from __future__ import annotations

from rollout.core.result import Result
from rollout.services.stage import StageContext, StageError, run_tool


def wait_command(ctx: StageContext) -> list[str]:
    return [
        "aws",
        "ecs",
        "wait",
        "services-stable",
        "--cluster",
        ctx.descriptor.cluster,
        "--services",
        ctx.descriptor.service_name,
    ]


def wait_until_stable(ctx: StageContext) -> Result[None, StageError]:
    # The cluster CLI polls and times out on its own.
    ctx.console.header(f"Wait for {ctx.descriptor.service_name} on {ctx.descriptor.cluster}")
    return run_tool(ctx, "wait", wait_command(ctx), env=ctx.run_env.cluster_env())
