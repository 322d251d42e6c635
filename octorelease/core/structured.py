"""Helpers for reading untyped TOML tables.

Used where the persisted global configuration is parsed, so the rest of the
code only ever sees ``str | None``.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def clean_str(value: object) -> str | None:
    """Strip a string value; None if not a str or empty after stripping."""
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    return clean_str(table.get(key))


def toml_string(value: str) -> str:
    """Render ``value`` as a TOML basic string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'
