"""Check registry for plugin-style comparison strategies.

A check is a function ``(comparator, producer, expected) -> CheckResult``
registered under a kind name. Assertions name their kind; the registry is
consulted at call time, so strategies can be added without touching the
engine. Plain ``(passed, payload)`` tuples are accepted as results too.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from verdict.errors import UnknownCheckKindError


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one check.

    Attributes
    ----------
    passed
        Whether the checked condition held.
    payload
        What to show on failure: the actual results, the unexpected
        exception, or ``None`` when there is nothing to show.
    """

    passed: bool
    payload: Any = None

    def __bool__(self) -> bool:
        return self.passed


Producer: TypeAlias = Callable[[], Any]
CheckFn: TypeAlias = Callable[[Any, Producer, Sequence[Any]], "CheckResult | tuple[bool, Any]"]

_check_registry: dict[str, CheckFn] = {}
_builtin_registry: dict[str, CheckFn] = {}


def check_kind(
    kind: str,
    *,
    enabled: bool = True,
) -> Callable[[CheckFn], CheckFn]:
    """Register the decorated function as the check for ``kind``.

        @check_kind("approx")
        def approx(comparator, producer, expected):
            ...
    """

    def decorator(fn: CheckFn) -> CheckFn:
        if enabled:
            register_check(kind, fn)
        return fn

    return decorator


def register_check(kind: str, fn: CheckFn) -> None:
    """Register ``fn`` under ``kind``, replacing any previous check."""
    if not kind:
        msg = "Check kind must be a non-empty string"
        raise ValueError(msg)
    _check_registry[kind] = fn


def register_builtin(kind: str) -> Callable[[CheckFn], CheckFn]:
    """Register a built-in check (persists through clear)."""

    def decorator(fn: CheckFn) -> CheckFn:
        _check_registry[kind] = fn
        _builtin_registry[kind] = fn
        return fn

    return decorator


def unregister_check(kind: str) -> bool:
    """Remove a check. Returns whether one was registered."""
    return _check_registry.pop(kind, None) is not None


def get_check_registry() -> dict[str, CheckFn]:
    """Get the global check registry."""
    return _check_registry


def clear_check_registry() -> None:
    """Clear all registered checks, keeping built-ins."""
    _check_registry.clear()
    _check_registry.update(_builtin_registry)


def resolve_check(kind: str) -> CheckFn:
    """Look up the check for ``kind``.

    Raises:
        UnknownCheckKindError: If nothing is registered under ``kind``.
    """
    try:
        return _check_registry[kind]
    except KeyError:
        raise UnknownCheckKindError(kind, _check_registry) from None


def as_check_result(result: CheckResult | tuple[bool, Any]) -> CheckResult:
    """Normalize what a check returned."""
    if isinstance(result, CheckResult):
        return result
    passed, payload = result
    return CheckResult(passed=bool(passed), payload=payload)


def check(kind: str, comparator: Any, producer: Producer, expected: Sequence[Any]) -> CheckResult:
    """Dispatch one check by kind and normalize its result."""
    fn = resolve_check(kind)
    return as_check_result(fn(comparator, producer, expected))


__all__ = [
    "CheckFn",
    "CheckResult",
    "Producer",
    "as_check_result",
    "check",
    "check_kind",
    "clear_check_registry",
    "get_check_registry",
    "register_builtin",
    "register_check",
    "resolve_check",
    "unregister_check",
]
