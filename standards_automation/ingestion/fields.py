"""
Ordered-keys lookup shared by every assembly path.

Source documents spell the same attribute several ways
(``clause_id`` / ``id`` / ``clauseNumber`` ...); each attribute is read
through a fixed priority list of keys and the first usable value wins.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence


def scalar_text(value: Any) -> str:
    """Render a scalar field as text; containers and None become ''."""
    if value is None or isinstance(value, (bool, dict, list, tuple, set)):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return ""


def first_present(
    obj: Mapping[str, Any],
    keys: Sequence[str],
    default: str = "",
) -> str:
    """Return the first non-empty scalar value found under ``keys``."""
    for key in keys:
        text = scalar_text(obj.get(key))
        if text:
            return text
    return default


def read_tags(obj: Mapping[str, Any]) -> tuple[str, ...]:
    """Read ``tags`` (a list) or a single ``tag``; duplicates dropped."""
    raw = obj.get("tags")
    if isinstance(raw, (list, tuple)):
        candidates = raw
    else:
        candidates = [obj.get("tag")]

    tags: list[str] = []
    for candidate in candidates:
        tag = scalar_text(candidate)
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags)


def list_field(obj: Mapping[str, Any], key: str) -> list[Any]:
    value = obj.get(key)
    if isinstance(value, list):
        return value
    return []
