"""Tests for rollout.core.structured module."""

from __future__ import annotations

from rollout.core.structured import as_str_dict, get_str, get_table


def test_as_str_dict() -> None:
    assert as_str_dict({"service": {}}) == {"service": {}}
    assert as_str_dict({1: "x"}) is None
    assert as_str_dict(["service"]) is None


def test_get_str_strips_and_rejects_blank() -> None:
    table: dict[str, object] = {"serviceName": "  api ", "cluster": "  ", "count": 3}
    assert get_str(table, "serviceName") == "api"
    assert get_str(table, "cluster") is None
    assert get_str(table, "count") is None
    assert get_str(table, "missing") is None


def test_get_table() -> None:
    table: dict[str, object] = {"service": {"serviceName": "api"}, "tags": ["a"]}
    assert get_table(table, "service") == {"serviceName": "api"}
    assert get_table(table, "tags") is None
    assert get_table(table, "missing") is None
