"""Verdict - named tests built from ordered, fault-isolated assertions."""

from .checks import check_kind, register_check
from .config import config_scope, configure, get_config
from .context import binding
from .errors import DefinitionError, UnknownCheckKindError, UnknownTestError, VerdictError
from .formatting import Pair, format_value
from .testing import (
    Assertion,
    TestCase,
    assert_equal,
    assert_prints,
    assert_raises,
    assertion,
    define_test,
    deftest,
    expect,
    get_registry,
    run_test,
    run_tests,
    undefine_test,
)
from .types import Values
from .version import __version__


__all__ = [
    # Definition
    "Assertion",
    "TestCase",
    "assertion",
    "assert_equal",
    "assert_prints",
    "assert_raises",
    "binding",
    "define_test",
    "deftest",
    "undefine_test",
    "Values",
    # Execution
    "expect",
    "get_registry",
    "run_test",
    "run_tests",
    # Extension
    "check_kind",
    "register_check",
    "format_value",
    "Pair",
    # Configuration
    "config_scope",
    "configure",
    "get_config",
    # Errors
    "DefinitionError",
    "UnknownCheckKindError",
    "UnknownTestError",
    "VerdictError",
]
