"""Short diagnostic renderings of arbitrary values.

``format_value`` is a single-dispatch function: register a renderer for a new
shape with ``@format_value.register(MyType)``. Renderers of containers call
``format_value`` on their elements, so custom shapes nest correctly.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from functools import singledispatch
from typing import Any


MAX_ITEMS = 3
MAX_REPR_LENGTH = 60
EMPTY = "NIL"
ELLIPSIS = "..."


@dataclass(frozen=True, slots=True)
class Pair:
    """A two-slot cell that is not a list, rendered in dotted notation."""

    head: Any
    tail: Any


def _truncate(text: str, max_len: int = MAX_REPR_LENGTH) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - len(ELLIPSIS)] + ELLIPSIS


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def safe_str(value: Any) -> str:
    """``str(value)``, or a placeholder when that raises."""
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _bounded(items: Iterable[str]) -> list[str]:
    parts: list[str] = []
    for index, item in enumerate(items):
        if index == MAX_ITEMS:
            parts.append(ELLIPSIS)
            break
        parts.append(item)
    return parts


@singledispatch
def format_value(value: Any) -> str:
    """Render ``value`` for a failure message. Never raises."""
    return _truncate(_safe_repr(value))


@format_value.register(str)
@format_value.register(bytes)
@format_value.register(bytearray)
def _format_scalar_text(value: str | bytes | bytearray) -> str:
    return _truncate(_safe_repr(value))


@format_value.register(Mapping)
def _format_mapping(value: Mapping) -> str:
    try:
        if not value:
            return EMPTY
        entries = (f"{format_value(k)}: {format_value(v)}" for k, v in value.items())
        return "{" + ", ".join(_bounded(entries)) + "}"
    except Exception:
        return _truncate(_safe_repr(value))


@format_value.register(tuple)
def _format_tuple(value: tuple) -> str:
    try:
        if not value:
            return EMPTY
        return "(" + ", ".join(_bounded(format_value(item) for item in value)) + ")"
    except Exception:
        return _truncate(_safe_repr(value))


@format_value.register(Sequence)
@format_value.register(Set)
def _format_sequence(value: Sequence | Set) -> str:
    try:
        if not value:
            return EMPTY
        return "[" + ", ".join(_bounded(format_value(item) for item in value)) + "]"
    except Exception:
        return _truncate(_safe_repr(value))


@format_value.register(Pair)
def _format_pair(value: Pair) -> str:
    try:
        return f"({format_value(value.head)} . {format_value(value.tail)})"
    except Exception:
        return _truncate(_safe_repr(value))


def format_values(values: Iterable[Any]) -> str:
    """Render several values as one space-separated string."""
    return " ".join(format_value(value) for value in values)


__all__ = ["EMPTY", "MAX_ITEMS", "MAX_REPR_LENGTH", "Pair", "format_value", "format_values", "safe_str"]
