"""Example: registering a new check kind and a new value shape.

Run with:
    verdict examples.custom_check -n custom
"""

import re
from dataclasses import dataclass

from verdict import assertion, check_kind, define_test, format_value
from verdict.checks import CheckResult


@check_kind("matches")
def check_matches(comparator, producer, expected):
    """Pass when the produced text matches the regular expression in ``expected[0]``."""
    text = producer()
    passed = re.fullmatch(expected[0], text) is not None
    return CheckResult(passed=passed, payload=None if passed else text)


@dataclass
class Money:
    cents: int


@format_value.register(Money)
def _format_money(value: Money) -> str:
    return f"${value.cents / 100:.2f}"


define_test(
    "invoice",
    [
        assertion("matches", lambda: "INV-0042", r"INV-\d{4}", form="invoice number"),
        assertion("equal", lambda: Money(1999), Money(1999), form="total"),
    ],
    namespace="custom",
)
