"""Defensive JSON pointer traversal for decoded response documents.

Lookups never raise: a segment that does not exist, an index out of
range or a scalar in the middle of a path all resolve to ``MISSING``.
"""

from __future__ import annotations

import json
import math
from typing import Any, Final, overload


class _Missing:
    """Sentinel type for paths that do not resolve."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def _segments(pointer: str) -> list[str]:
    if not pointer:
        return []
    if not pointer.startswith("/"):
        raise ValueError(f"JSON pointer must start with '/': {pointer!r}")
    return [
        part.replace("~1", "/").replace("~0", "~") for part in pointer[1:].split("/")
    ]


def resolve(doc: Any, pointer: str) -> Any:
    """Return the value at ``pointer`` inside ``doc`` or ``MISSING``."""

    node = doc
    for segment in _segments(pointer):
        if isinstance(node, dict):
            if segment not in node:
                return MISSING
            node = node[segment]
        elif isinstance(node, list):
            if not segment.isdigit() or (len(segment) > 1 and segment[0] == "0"):
                return MISSING
            index = int(segment)
            if index >= len(node):
                return MISSING
            node = node[index]
        else:
            return MISSING
    return node


def is_present(value: Any) -> bool:
    """Return ``True`` unless ``value`` is ``MISSING`` or JSON ``null``."""

    return value is not MISSING and value is not None


def first_node(doc: Any, *pointers: str) -> Any:
    """Return the first present value among ``pointers`` or ``None``."""

    for pointer in pointers:
        value = resolve(doc, pointer)
        if is_present(value):
            return value
    return None


@overload
def as_text(value: Any, default: str) -> str: ...


@overload
def as_text(value: Any, default: None = None) -> str | None: ...


def as_text(value: Any, default: str | None = None) -> str | None:
    """Render a JSON value as text.

    Strings are returned verbatim and numbers/booleans use their JSON
    spelling. Objects and arrays have no text rendering and yield ``""``.
    Absent values yield ``default``.
    """

    if not is_present(value):
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool | int | float):
        return json.dumps(value)
    return ""


def first_text(doc: Any, *pointers: str) -> str | None:
    """Return the text of the first present value among ``pointers``."""

    return as_text(first_node(doc, *pointers))


def as_int(value: Any, default: int = 0) -> int:
    """Coerce a JSON value to ``int``; non-numeric values yield ``default``."""

    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            value = float(value)
        except ValueError:
            return default
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    return default


__all__ = [
    "MISSING",
    "as_int",
    "as_text",
    "first_node",
    "first_text",
    "is_present",
    "resolve",
]
