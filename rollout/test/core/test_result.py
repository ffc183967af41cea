"""Tests for rollout.core.result module."""

from __future__ import annotations

import pytest

from rollout.core.result import Err, Ok, is_err, is_ok


def test_ok_accessors() -> None:
    result = Ok(3)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 3
    assert result.unwrap_or(0) == 3
    assert result.map(lambda v: v + 1) == Ok(4)
    assert result.map_err(str) is result
    assert is_ok(result)


def test_err_accessors() -> None:
    result: Err[str] = Err("boom")
    assert result.is_err()
    assert result.unwrap_or(7) == 7
    assert result.map(lambda v: v) is result
    assert result.map_err(str.upper) == Err("BOOM")
    assert is_err(result)
    with pytest.raises(ValueError, match="boom"):
        result.unwrap()


def test_pattern_matching() -> None:
    match Ok("v1"):
        case Ok(value):
            assert value == "v1"
        case Err():
            pytest.fail("expected Ok")
