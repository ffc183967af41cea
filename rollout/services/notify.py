"""Notify stage: announce the deployment with a previous..current range.

Notification is best-effort. Errors come back as Err(StageError) like every
other stage; the pipeline decides not to fail the run on them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

from rollout.core.result import Err, Ok, Result
from rollout.core.secrets import NOTIFY_SECRETS
from rollout.git.repository import Repository
from rollout.git.tags import EMPTY_TREE_SHA, NoPreviousRelease, PreviousRelease, resolve_previous_tag
from rollout.services.packages import NOTIFIER_BIN, NOTIFIER_PACKAGE
from rollout.services.stage import StageContext, StageError, load_stage_secrets, run_tool

NoPreviousPolicy = Literal["skip", "empty-tree"]


@dataclass(frozen=True, slots=True)
class NotifyOutcome:
    status: Literal["sent", "skipped"]
    previous: str | None = None
    reason: str | None = None


def notify_command(ctx: StageContext, *, previous: str) -> list[str]:
    return [
        "npx",
        "--package",
        NOTIFIER_PACKAGE,
        NOTIFIER_BIN,
        "-N",
        ctx.run_env.repository_name,
        "-P",
        previous,
        "-T",
        ctx.version,
        "-E",
        environment_label(ctx),
    ]


def environment_label(ctx: StageContext) -> str:
    """Environment shown in the notification: the descriptor path as given."""
    return str(ctx.descriptor.path)


def notify(
    ctx: StageContext, *, on_no_previous: NoPreviousPolicy = "skip"
) -> Result[NotifyOutcome, StageError]:
    """Resolve the previous release and run the notifier.

    Args:
        ctx: Stage context.
        on_no_previous: "skip" reports a skipped notification when no release
            precedes this one; "empty-tree" announces the whole history.
    """
    ctx.console.header("Notify")

    secrets = load_stage_secrets(ctx, "notify", NOTIFY_SECRETS)
    if isinstance(secrets, Err):
        return secrets

    tags = Repository(ctx.workdir).tags()
    if isinstance(tags, Err):
        return Err(
            StageError(
                stage="notify",
                kind="tag_lookup_failed",
                message=tags.error.message,
                hint="Tags must be fetched before this step (fetch-depth: 0)",
            )
        )

    match resolve_previous_tag(tags.value, current=ctx.version):
        case PreviousRelease(previous=previous):
            ctx.console.print(f"previous release: {previous}")
        case NoPreviousRelease(reason=reason, tags=all_tags):
            if on_no_previous == "skip":
                ctx.console.warning(
                    f"previous release tag not found ({reason}); skipping notification"
                )
                ctx.console.print(json.dumps({"all_tags": list(all_tags)}, indent=2))
                return Ok(NotifyOutcome(status="skipped", reason=reason))
            ctx.console.warning(f"{reason}; announcing changes since the beginning")
            previous = EMPTY_TREE_SHA

    env = {**ctx.run_env.cluster_env(), **secrets.value}
    result = run_tool(ctx, "notify", notify_command(ctx, previous=previous), env=env)
    if isinstance(result, Err):
        return result

    return Ok(NotifyOutcome(status="sent", previous=previous))
