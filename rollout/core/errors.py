"""Error codes for CLI exit status.

Each stage of a rollout maps its failures onto one of these codes so the
CI runner can tell a misconfigured job apart from a failed deployment.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad flags, invalid deploy descriptor)
    - 2: not used; typer reports command line usage errors with it
    - 3: Environment error (required environment variable missing)
    - 4: I/O error (secret or version file missing or unreadable)
    - 5: Deploy error (deploy tool failed)
    - 6: Wait error (service never became stable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 3
    IO_ERROR = 4
    DEPLOY_ERROR = 5
    WAIT_ERROR = 6

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
