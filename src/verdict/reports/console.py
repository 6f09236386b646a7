"""Console reporter writing through rich to the configured output."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from verdict.config import get_config

if TYPE_CHECKING:
    from verdict.testing.result import SuiteResult, TestRunResult


class ConsoleReporter:
    """Prints one OK/FAILED line per test, preceded by diagnostics when verbose.

    ``output`` and ``verbose`` default to the process-wide settings, read at
    the time of each report.
    """

    def __init__(self, output: TextIO | None = None, verbose: bool | None = None) -> None:
        self._output = output
        self._verbose = verbose

    @property
    def verbose(self) -> bool:
        return self._verbose if self._verbose is not None else get_config().verbose

    def _console(self) -> Console:
        stream = self._output if self._output is not None else get_config().stream
        return Console(file=stream, highlight=False, soft_wrap=True, emoji=False)

    def on_test_complete(self, result: TestRunResult) -> None:
        console = self._console()
        if self.verbose:
            for failure in result.failures:
                console.print(f"  [yellow]Failed:[/yellow] {escape(failure.describe())}")
            for fault in result.errors:
                console.print(f"  [red]Error:[/red] {escape(fault.describe())}")
        status = "[green]OK[/green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(f"{escape(result.name)}: {status}")

    def on_suite_complete(self, result: SuiteResult) -> None:
        console = self._console()
        if result.passed:
            console.print(f"[green]{len(result.ran)} test(s) passed[/green] in {escape(result.namespace)}")
            return

        table = Table(title=f"Failing tests in {escape(result.namespace)}")
        table.add_column("Test")
        table.add_column("Failures", justify="right")
        table.add_column("Errors", justify="right")
        for name in result.failed_tests:
            table.add_row(
                escape(name),
                str(len(result.failures.get(name, []))),
                str(len(result.errors.get(name, []))),
            )
        console.print(table)
        console.print(f"[red]{len(result.failed_tests)} of {len(result.ran)} test(s) failed[/red]")


__all__ = ["ConsoleReporter"]
