"""Built-in comparison strategies."""

from __future__ import annotations

import operator
import sys
from collections.abc import Sequence
from typing import Any

from verdict.checks.registry import CheckFn, CheckResult, Producer, register_builtin
from verdict.context.output_capture import capture_sink
from verdict.types import as_results


EQUAL = "equal"
RAISES = "raises"
PRINTS = "prints"
PRINTS_STDERR = "prints-stderr"


@register_builtin(EQUAL)
def check_equal(comparator: Any, producer: Producer, expected: Sequence[Any]) -> CheckResult:
    """Compare result values to expected values pairwise.

    Pairs are formed up to the shorter of the two lists, so extra result
    values beyond the expected ones are not checked.
    """
    test = comparator if comparator is not None else operator.eq
    results = as_results(producer())
    passed = all(test(result, value) for result, value in zip(results, expected))
    return CheckResult(passed=passed, payload=None if passed else results)


def _keyword(name: str) -> str:
    return name.replace("-", "").replace("_", "").casefold()


def exception_matches(error: BaseException, comparator: Any) -> bool:
    """Whether ``error`` is of the kind named by ``comparator``.

    A class matches by ``isinstance``. A string matches the name of the
    exception's type or any of its bases, ignoring case, ``-`` and ``_``.
    """
    if isinstance(comparator, type):
        return isinstance(error, comparator)
    wanted = _keyword(str(comparator))
    return any(_keyword(cls.__name__) == wanted for cls in type(error).__mro__)


@register_builtin(RAISES)
def check_raises(comparator: Any, producer: Producer, expected: Sequence[Any]) -> CheckResult:
    """Expect ``producer`` to raise the exception named by ``comparator``."""
    try:
        producer()
    except Exception as exc:
        if exception_matches(exc, comparator):
            return CheckResult(passed=True)
        return CheckResult(passed=False, payload=exc)
    return CheckResult(passed=False)


def print_capture_check(owner: Any, attribute: str) -> CheckFn:
    """Build a check comparing text written to ``owner.attribute``.

    The comparator is ignored. The sink is restored before the check returns
    or before an error raised by the producer propagates.
    """

    def check_prints(comparator: Any, producer: Producer, expected: Sequence[Any]) -> CheckResult:
        with capture_sink(owner, attribute) as buffer:
            producer()
        text = buffer.getvalue()
        passed = bool(expected) and text == expected[0]
        return CheckResult(passed=passed, payload=None if passed else text)

    check_prints.__name__ = f"check_prints_{attribute}"
    return check_prints


check_prints = register_builtin(PRINTS)(print_capture_check(sys, "stdout"))
check_prints_stderr = register_builtin(PRINTS_STDERR)(print_capture_check(sys, "stderr"))


__all__ = [
    "EQUAL",
    "PRINTS",
    "PRINTS_STDERR",
    "RAISES",
    "check_equal",
    "check_prints",
    "check_prints_stderr",
    "check_raises",
    "exception_matches",
    "print_capture_check",
]
