"""Run environment and deploy descriptor loading.

Values the external tools need are collected into frozen dataclasses here
and handed to each stage explicitly. Nothing in this package writes to
os.environ.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result
from .structured import as_str_dict, get_str, get_table

__all__ = [
    "DEFAULT_CLUSTER",
    "REPOSITORY_NAME_VAR",
    "REGION_VAR",
    "ConfigError",
    "DeployDescriptor",
    "RunEnvironment",
    "load_descriptor",
]

DEFAULT_CLUSTER = "default"

REPOSITORY_NAME_VAR = "REPOSITORY_NAME"
REGION_VAR = "AWS_REGION"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the environment or the deploy descriptor is unusable."""

    kind: Literal["env_missing", "descriptor_missing", "descriptor_invalid"]
    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class RunEnvironment:
    """Process-level inputs shared by every stage.

    Attributes:
        repository_name: Repository identifier passed to the notifier.
        region: Cloud region for the cluster CLI (None leaves the CLI default).
    """

    repository_name: str
    region: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> Result[RunEnvironment, ConfigError]:
        repository_name = (environ.get(REPOSITORY_NAME_VAR) or "").strip()
        if not repository_name:
            return Err(
                ConfigError(
                    kind="env_missing",
                    message=f"Required environment variable {REPOSITORY_NAME_VAR} is not set.",
                    hint=f"export {REPOSITORY_NAME_VAR}=<owner/repo>",
                )
            )

        region = (environ.get(REGION_VAR) or "").strip() or None
        return Ok(cls(repository_name=repository_name, region=region))

    def cluster_env(self) -> dict[str, str]:
        """Environment overlay for cluster CLI calls."""
        if self.region is None:
            return {}
        return {"AWS_DEFAULT_REGION": self.region}


@dataclass(frozen=True, slots=True)
class DeployDescriptor:
    """Parsed deploy descriptor.

    Attributes:
        path: Descriptor file as given on the command line.
        service_name: Value of service.serviceName.
        cluster: Value of service.cluster, "default" when absent.
    """

    path: Path
    service_name: str
    cluster: str = DEFAULT_CLUSTER

    @classmethod
    def from_dict(cls, path: Path, data: Mapping[str, object]) -> Result[DeployDescriptor, ConfigError]:
        service = get_table(data, "service")
        if service is None:
            return Err(
                ConfigError(
                    kind="descriptor_invalid",
                    message=f"{path}: missing 'service' section",
                    path=path,
                )
            )

        service_name = get_str(service, "serviceName")
        if service_name is None:
            return Err(
                ConfigError(
                    kind="descriptor_invalid",
                    message=f"{path}: missing 'service.serviceName'",
                    path=path,
                )
            )

        cluster = get_str(service, "cluster") or DEFAULT_CLUSTER
        return Ok(cls(path=path, service_name=service_name, cluster=cluster))


def load_descriptor(path: Path) -> Result[DeployDescriptor, ConfigError]:
    """Load a deploy descriptor from a JSON or TOML file.

    Files ending in .toml are parsed as TOML, anything else as JSON.

    Args:
        path: Descriptor path.

    Returns:
        Ok(DeployDescriptor) on success, Err(ConfigError) otherwise.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(
            ConfigError(
                kind="descriptor_missing",
                message=f"deploy descriptor not found: {path}",
                path=path,
            )
        )
    except OSError as e:
        return Err(
            ConfigError(
                kind="descriptor_invalid",
                message=f"cannot read deploy descriptor {path}: {e}",
                path=path,
            )
        )
    except UnicodeDecodeError as e:
        return Err(
            ConfigError(
                kind="descriptor_invalid",
                message=f"deploy descriptor {path} is not valid UTF-8: {e}",
                path=path,
            )
        )

    parsed: object
    try:
        if path.suffix == ".toml":
            parsed = tomllib.loads(text)
        else:
            parsed = json.loads(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        return Err(
            ConfigError(
                kind="descriptor_invalid",
                message=f"cannot parse deploy descriptor {path}: {e}",
                path=path,
            )
        )

    data = as_str_dict(parsed)
    if data is None:
        return Err(
            ConfigError(
                kind="descriptor_invalid",
                message=f"{path}: expected an object at top level",
                path=path,
            )
        )

    return DeployDescriptor.from_dict(path, data)
