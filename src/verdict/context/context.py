from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)


@dataclass(frozen=True, slots=True)
class TestContext:
    """Execution context for the test currently running.

    Attributes
    ----------
    test_name
        Name of the running test.
    namespace
        Namespace the test is registered in, if any.
    bindings
        Local values established for the run, by name.
    """

    test_name: str
    namespace: str | None = None
    bindings: Mapping[str, Any] = field(default_factory=dict)


@contextmanager
def test_context_scope(ctx: TestContext) -> Iterator[None]:
    token = TEST_CONTEXT.set(ctx)
    try:
        yield
    finally:
        TEST_CONTEXT.reset(token)


def current_test() -> TestContext | None:
    return TEST_CONTEXT.get()


def evaluate_bindings(
    test_name: str,
    factories: Mapping[str, Callable[[], Any]],
    namespace: str | None = None,
) -> dict[str, Any]:
    """Evaluate binding factories in order.

    Each factory runs with the bindings evaluated before it already visible,
    so later factories may build on earlier ones.
    """
    values: dict[str, Any] = {}
    for name, factory in factories.items():
        ctx = TestContext(test_name=test_name, namespace=namespace, bindings=MappingProxyType(dict(values)))
        with test_context_scope(ctx):
            values[name] = factory()
    return values


def binding(name: str) -> Any:
    """Return the value bound to ``name`` for the test currently running."""
    ctx = TEST_CONTEXT.get()
    if ctx is None:
        msg = f"binding({name!r}) used outside of a running test"
        raise RuntimeError(msg)
    try:
        return ctx.bindings[name]
    except KeyError:
        msg = f"Test {ctx.test_name!r} has no binding named {name!r}"
        raise KeyError(msg) from None
