"""Typed access to parsed deploy descriptors.

json and tomllib hand back untyped objects. These helpers check shape at
the boundary so config code can work with narrowed types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

__all__ = ["StrDict", "as_str_dict", "get_str", "get_table"]

StrDict = dict[str, object]


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as a string-keyed dict, or None if it is anything else."""
    if isinstance(obj, dict) and all(isinstance(k, str) for k in obj):
        return cast(StrDict, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """String value under key, stripped. Missing, non-str and blank give None."""
    value = table.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))
