"""Rollout pipeline: deploy, wait for stability, notify.

Stages run strictly in sequence. A failed deploy stops everything; a failed
wait stops the notification. A failed notification is reported but does
not fail the run, because by then the new version is already serving.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rollout.core.result import Err, Ok, Result
from rollout.services.deploy import deploy
from rollout.services.notify import NoPreviousPolicy, NotifyOutcome, notify
from rollout.services.packages import DEPLOYER_PACKAGE
from rollout.services.stage import StageContext, StageError
from rollout.services.wait import wait_until_stable

StageFn = Callable[[StageContext], Result[None, StageError]]
NotifyFn = Callable[[StageContext], Result[NotifyOutcome, StageError]]


@dataclass(frozen=True, slots=True)
class PipelineReport:
    """Outcome of a successful rollout.

    Attributes:
        notification: What the notify stage did, None if it failed.
        notify_error: The notify stage error, when it failed.
    """

    notification: NotifyOutcome | None
    notify_error: StageError | None = None

    @property
    def notified(self) -> bool:
        return self.notification is not None and self.notification.status == "sent"


class DeployPipeline:
    def __init__(
        self,
        ctx: StageContext,
        *,
        on_no_previous: NoPreviousPolicy = "skip",
        deployer_package: str = DEPLOYER_PACKAGE,
        deploy_stage: StageFn | None = None,
        wait_stage: StageFn | None = None,
        notify_stage: NotifyFn | None = None,
    ) -> None:
        self._ctx = ctx
        self._deploy = deploy_stage or (lambda c: deploy(c, package=deployer_package))
        self._wait = wait_stage or wait_until_stable
        self._notify = notify_stage or (lambda c: notify(c, on_no_previous=on_no_previous))

    def run(self) -> Result[PipelineReport, StageError]:
        console = self._ctx.console

        deployed = self._deploy(self._ctx)
        if isinstance(deployed, Err):
            return deployed
        console.success(f"deployed {self._ctx.version}")

        stable = self._wait(self._ctx)
        if isinstance(stable, Err):
            return stable
        console.success(f"{self._ctx.descriptor.service_name} is stable")

        match self._notify(self._ctx):
            case Ok(outcome):
                if outcome.status == "sent":
                    console.success("deployment notification sent")
                return Ok(PipelineReport(notification=outcome))
            case Err(error):
                console.warning(f"{error}; deployment itself succeeded")
                if error.hint:
                    console.print(f"hint: {error.hint}")
                return Ok(PipelineReport(notification=None, notify_error=error))
