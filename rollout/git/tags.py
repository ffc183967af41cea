"""Release tag resolution.

A release tag is any tag starting with "v". Given tag history newest first,
the current release is the newest release tag and the previous release is
the one right after it. Resolution never raises: when there is no previous
release the caller gets NoPreviousRelease and decides what to do.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

__all__ = [
    "EMPTY_TREE_SHA",
    "RELEASE_TAG_PREFIX",
    "NoPreviousRelease",
    "PreviousRelease",
    "TagResolution",
    "release_tags",
    "resolve_previous_tag",
]

RELEASE_TAG_PREFIX = "v"

# Object id of the empty tree in every git repository. Diffing from it
# covers the whole history.
EMPTY_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


@dataclass(frozen=True, slots=True)
class PreviousRelease:
    current: str
    previous: str


@dataclass(frozen=True, slots=True)
class NoPreviousRelease:
    """No release precedes the current one.

    Attributes:
        reason: Why resolution stopped.
        tags: The full tag list that was inspected, for diagnostics.
    """

    reason: str
    tags: tuple[str, ...]
    current: str | None = None


TagResolution = Union[PreviousRelease, NoPreviousRelease]


def release_tags(tags: Sequence[str]) -> list[str]:
    """Release tags in their original order."""
    return [t for t in tags if t.startswith(RELEASE_TAG_PREFIX)]


def resolve_previous_tag(tags: Sequence[str], current: str | None = None) -> TagResolution:
    """Find the release tag that precedes the current one.

    Args:
        tags: Tag names ordered newest first. The order is trusted as is.
        current: The tag of the release being shipped. When given and present
            in the history, resolution starts from it; otherwise the newest
            release tag is taken as current.

    Returns:
        PreviousRelease or NoPreviousRelease.
    """
    matches = release_tags(tags)
    snapshot = tuple(tags)

    if not matches:
        return NoPreviousRelease(reason="no release tags found", tags=snapshot, current=current)

    index = 0
    if current is not None and current in matches:
        index = matches.index(current)

    if index + 1 >= len(matches):
        return NoPreviousRelease(
            reason=f"no release tag before {matches[index]}",
            tags=snapshot,
            current=matches[index],
        )

    return PreviousRelease(current=matches[index], previous=matches[index + 1])
