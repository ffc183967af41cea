"""Git repository access.

Only the read operations a rollout needs: listing tags in creation order.
All operations return Result types.

Usage:
    repo = Repository(Path("."))
    match repo.tags():
        case Ok(tags):
            print(tags[:5])
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rollout.core.result import Err, Ok, Result
from rollout.platform.process import ProcessError
from rollout.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A git checkout on disk.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def tags(self) -> Result[list[str], GitError]:
        """List tags, newest first by creator date.

        Runs `git tag -l --sort=-creatordate`. Tags sharing a timestamp keep
        the order git emits them in.

        Returns:
            Ok(list of tag names) on success
            Err(GitError) on failure
        """
        result = self._run(["tag", "-l", "--sort=-creatordate"])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="tag -l",
                        message=e.stderr.strip() or "git tag failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok([ln.strip() for ln in stdout.splitlines() if ln.strip()])

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(
            ["git", *args], cwd=self.path, timeout=_GIT_TIMEOUT_SECONDS
        )
