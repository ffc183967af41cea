"""Tests for rollout.git.tags module."""

from __future__ import annotations

from rollout.git.tags import (
    EMPTY_TREE_SHA,
    NoPreviousRelease,
    PreviousRelease,
    release_tags,
    resolve_previous_tag,
)


class TestReleaseTags:
    def test_keeps_only_v_prefixed_in_order(self) -> None:
        tags = ["v2.0.0", "nightly", "v1.1.0", "build-7", "v1.0.0"]
        assert release_tags(tags) == ["v2.0.0", "v1.1.0", "v1.0.0"]

    def test_empty(self) -> None:
        assert release_tags([]) == []


class TestResolvePreviousTag:
    def test_second_newest_is_previous(self) -> None:
        result = resolve_previous_tag(["v3", "v2", "v1"], current="v3")
        assert result == PreviousRelease(current="v3", previous="v2")

    def test_without_current_uses_newest(self) -> None:
        result = resolve_previous_tag(["v3", "v2", "v1"])
        assert result == PreviousRelease(current="v3", previous="v2")

    def test_single_tag_has_no_previous(self) -> None:
        result = resolve_previous_tag(["v1"])
        assert isinstance(result, NoPreviousRelease)
        assert result.current == "v1"
        assert result.tags == ("v1",)

    def test_empty_history_has_no_previous(self) -> None:
        result = resolve_previous_tag([])
        assert isinstance(result, NoPreviousRelease)
        assert result.tags == ()
        assert "no release tags" in result.reason

    def test_non_release_tags_ignored(self) -> None:
        result = resolve_previous_tag(["latest", "v5", "staging", "v4"])
        assert result == PreviousRelease(current="v5", previous="v4")

    def test_only_non_release_tags(self) -> None:
        result = resolve_previous_tag(["latest", "staging"])
        assert isinstance(result, NoPreviousRelease)
        assert result.tags == ("latest", "staging")

    def test_current_found_lower_in_history(self) -> None:
        result = resolve_previous_tag(["v4", "v3", "v2"], current="v3")
        assert result == PreviousRelease(current="v3", previous="v2")

    def test_current_is_oldest(self) -> None:
        result = resolve_previous_tag(["v4", "v3"], current="v3")
        assert isinstance(result, NoPreviousRelease)
        assert result.current == "v3"

    def test_unknown_current_falls_back_to_newest(self) -> None:
        result = resolve_previous_tag(["v3", "v2"], current="1.2.3")
        assert result == PreviousRelease(current="v3", previous="v2")

    def test_order_is_not_resorted(self) -> None:
        # Same creator date: git's own order wins, even if it looks unsorted.
        result = resolve_previous_tag(["v1.0.0", "v2.0.0", "v0.9.0"])
        assert result == PreviousRelease(current="v1.0.0", previous="v2.0.0")


def test_empty_tree_sha_shape() -> None:
    assert len(EMPTY_TREE_SHA) == 40
    int(EMPTY_TREE_SHA, 16)
