"""Comparison strategies, dispatched by assertion kind."""

from .registry import (
    CheckFn,
    CheckResult,
    check,
    check_kind,
    clear_check_registry,
    get_check_registry,
    register_check,
    resolve_check,
    unregister_check,
)
from .builtin import (
    EQUAL,
    PRINTS,
    PRINTS_STDERR,
    RAISES,
    exception_matches,
    print_capture_check,
)

__all__ = [
    # Registry
    "CheckFn",
    "CheckResult",
    "check",
    "check_kind",
    "clear_check_registry",
    "get_check_registry",
    "register_check",
    "resolve_check",
    "unregister_check",
    # Built-in kinds
    "EQUAL",
    "PRINTS",
    "PRINTS_STDERR",
    "RAISES",
    "exception_matches",
    "print_capture_check",
]
