"""Core types: results, exit codes, configuration and secrets."""

from .config import (
    DEFAULT_CLUSTER,
    ConfigError,
    DeployDescriptor,
    RunEnvironment,
    load_descriptor,
)
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .secrets import SecretError, SecretSet, find_version, read_secret

__all__ = [
    # config
    "DEFAULT_CLUSTER",
    "ConfigError",
    "DeployDescriptor",
    "RunEnvironment",
    "load_descriptor",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # secrets
    "SecretError",
    "SecretSet",
    "find_version",
    "read_secret",
]
