"""Shared types for the verdict engine."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Values(tuple):
    """Several result values returned by one producer.

    A producer returning ``Values(1, 2)`` is checked value by value against
    the expected values; anything else counts as a single result.
    """

    __slots__ = ()

    def __new__(cls, *values: Any) -> Values:
        return super().__new__(cls, values)

    def __repr__(self) -> str:
        return f"Values{tuple.__repr__(self)}"


def as_results(value: Any) -> list[Any]:
    """Return a producer's result values as a list."""
    if isinstance(value, Values):
        return list(value)
    return [value]


class OutcomeStatus(Enum):
    """Outcome of a single assertion within a run."""

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


class TestState(Enum):
    """Last known state of a registered test."""

    __test__ = False

    UNKNOWN = "unknown"  # Defined, never run
    PASSING = "passing"
    FAILING = "failing"
