"""Container service rollout automation for CI pipelines."""

__version__ = "0.3.0"
