"""Git operations module.

- Repository: tag listing for a checkout
- Release tag resolution

Usage:
    from rollout.git import Repository, resolve_previous_tag

    tags = Repository(Path(".")).tags()
    if tags.is_ok():
        print(resolve_previous_tag(tags.unwrap()))
"""

from rollout.git.repository import GitError, Repository
from rollout.git.tags import (
    EMPTY_TREE_SHA,
    NoPreviousRelease,
    PreviousRelease,
    TagResolution,
    release_tags,
    resolve_previous_tag,
)

__all__ = [
    # Repository
    "GitError",
    "Repository",
    # Tags
    "EMPTY_TREE_SHA",
    "NoPreviousRelease",
    "PreviousRelease",
    "TagResolution",
    "release_tags",
    "resolve_previous_tag",
]
