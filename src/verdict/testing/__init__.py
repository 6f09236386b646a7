"""Test definition and execution.

Tests are declared as ordered assertions, registered by name in a namespace
and run one at a time or as a suite.
"""

from .case import Assertion, TestCase, make_case
from .declare import assert_equal, assert_prints, assert_raises, assertion, expect
from .registry import (
    Registry,
    define_test,
    deftest,
    drop_registry,
    get_registry,
    namespaces,
    run_test,
    run_tests,
    undefine_test,
)
from .result import (
    AssertionFailure,
    AssertionFault,
    AssertionOutcome,
    SuiteResult,
    TestRunResult,
)


__all__ = [
    "Assertion",
    "TestCase",
    "make_case",
    "assertion",
    "assert_equal",
    "assert_prints",
    "assert_raises",
    "expect",
    "Registry",
    "define_test",
    "deftest",
    "drop_registry",
    "get_registry",
    "namespaces",
    "run_test",
    "run_tests",
    "undefine_test",
    "AssertionFailure",
    "AssertionFault",
    "AssertionOutcome",
    "SuiteResult",
    "TestRunResult",
]
