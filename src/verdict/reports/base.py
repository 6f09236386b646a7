"""Base reporter protocol for verdict progress output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from verdict.testing.result import SuiteResult, TestRunResult


class Reporter(Protocol):
    """Protocol defining the interface for progress reporters."""

    def on_test_complete(self, result: TestRunResult) -> None:
        """Called after each test runs."""
        ...

    def on_suite_complete(self, result: SuiteResult) -> None:
        """Called after every selected test of a namespace has run."""
        ...
