from .context import (
    TestContext,
    TEST_CONTEXT,
    binding,
    current_test,
    evaluate_bindings,
    test_context_scope,
)
from .output_capture import SinkSwap, capture_sink

__all__ = [
    "TestContext",
    "TEST_CONTEXT",
    "binding",
    "current_test",
    "evaluate_bindings",
    "test_context_scope",
    "SinkSwap",
    "capture_sink",
]
