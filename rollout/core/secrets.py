"""Secret and version artifact files.

The CI job provisions each credential as a plain text file next to the
checkout (SECRET_<NAME>.txt). They are read, trimmed, and turned into an
environment overlay for the single external call that needs them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result

__all__ = [
    "DEPLOY_SECRETS",
    "NOTIFY_SECRETS",
    "VERSION_CANDIDATES",
    "SecretError",
    "SecretFile",
    "SecretSet",
    "find_version",
    "read_secret",
]


@dataclass(frozen=True, slots=True)
class SecretError:
    """Error reading a secret or version file.

    Attributes:
        kind: "not_found" when the file does not exist, "io_error" otherwise.
        path: The file that could not be read.
        message: Human readable description.
    """

    kind: Literal["not_found", "io_error"]
    path: Path
    message: str


@dataclass(frozen=True, slots=True)
class SecretFile:
    """Maps an environment variable to the file holding its value."""

    env_name: str
    filename: str


@dataclass(frozen=True, slots=True)
class SecretSet:
    """A group of secrets loaded together for one stage."""

    files: tuple[SecretFile, ...]

    def load(self, secrets_dir: Path) -> Result[dict[str, str], SecretError]:
        """Read every file of the set, stopping at the first failure."""
        env: dict[str, str] = {}
        for secret in self.files:
            match read_secret(secrets_dir / secret.filename):
                case Ok(value):
                    env[secret.env_name] = value
                case Err() as err:
                    return err
        return Ok(env)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(s.env_name for s in self.files)


def _secret(env_name: str, stem: str | None = None) -> SecretFile:
    return SecretFile(env_name=env_name, filename=f"SECRET_{stem or env_name}.txt")


DEPLOY_SECRETS = SecretSet(
    files=(
        _secret("SPLUNK_TOKEN"),
        _secret("NEW_RELIC_EVENT_INSERT_KEY"),
        _secret("NEW_RELIC_LICENSE_KEY"),
        _secret("NODE_AUTH_TOKEN", "NPM_TOKEN"),
    )
)

NOTIFY_SECRETS = SecretSet(
    files=(
        _secret("NODE_DEPLOYMENT_NOTIFIER_SLACK_WEBHOOK_URL"),
        _secret("NODE_DEPLOYMENT_NOTIFIER_SLACK_USERNAME"),
        _secret("NODE_DEPLOYMENT_NOTIFIER_SLACK_CHANNEL"),
        _secret("NODE_DEPLOYMENT_NOTIFIER_WEBHOOK_URL"),
        _secret("NODE_DEPLOYMENT_NOTIFIER_WEBHOOK_BASIC_AUTH_USERNAME"),
        _secret("NODE_DEPLOYMENT_NOTIFIER_WEBHOOK_BASIC_AUTH_PASSWORD"),
    )
)

# Artifact download tools disagree on whether the artifact name becomes a
# directory, so both layouts are accepted.
VERSION_CANDIDATES: tuple[Path, ...] = (
    Path("VERSION") / "VERSION.txt",
    Path("VERSION.txt"),
)


def read_secret(path: Path) -> Result[str, SecretError]:
    """Read a text file and strip surrounding whitespace."""
    try:
        return Ok(path.read_text(encoding="utf-8").strip())
    except FileNotFoundError:
        return Err(SecretError(kind="not_found", path=path, message=f"file not found: {path}"))
    except OSError as e:
        return Err(SecretError(kind="io_error", path=path, message=f"cannot read {path}: {e}"))
    except UnicodeDecodeError as e:
        return Err(SecretError(kind="io_error", path=path, message=f"{path} is not valid UTF-8: {e}"))


def find_version(
    root: Path, candidates: Sequence[Path] = VERSION_CANDIDATES
) -> Result[str, SecretError]:
    """Read the version identifier from the first candidate that exists.

    Only a missing file moves on to the next candidate. Any other I/O error
    is returned as is.

    Args:
        root: Directory the candidates are relative to.
        candidates: Relative paths tried in order.

    Returns:
        Ok(version) or Err(SecretError). When no candidate exists the error
        lists every path that was tried.
    """
    tried: list[str] = []
    for candidate in candidates:
        path = root / candidate
        match read_secret(path):
            case Ok(value) if value:
                return Ok(value)
            case Ok(_):
                return Err(SecretError(kind="io_error", path=path, message=f"version file is empty: {path}"))
            case Err(error) if error.kind == "not_found":
                tried.append(str(path))
            case Err() as err:
                return err

    return Err(
        SecretError(
            kind="not_found",
            path=root / candidates[0] if candidates else root,
            message=f"version file not found (tried: {', '.join(tried) or 'nothing'})",
        )
    )
