"""Platform layer: subprocess execution."""

from .process import ProcessError, child_env, run, run_streaming

__all__ = ["ProcessError", "child_env", "run", "run_streaming"]
