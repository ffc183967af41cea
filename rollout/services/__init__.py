"""Rollout stages and the pipeline that sequences them.

Stage functions live in their own modules (deploy, wait, notify); only the
shared types are re-exported here.
"""

from .notify import NotifyOutcome
from .pipeline import DeployPipeline, PipelineReport
from .stage import StageContext, StageError

__all__ = [
    "DeployPipeline",
    "NotifyOutcome",
    "PipelineReport",
    "StageContext",
    "StageError",
]
