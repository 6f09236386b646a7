"""Error types raised to callers of the verdict engine.

Ordinary assertion failures and faults are never raised; they are recorded
on the run result. Only definition-level problems surface as exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable


class VerdictError(Exception):
    """Base class for every error raised by verdict."""


class DefinitionError(VerdictError):
    """Raised when a test or assertion is misdefined (developer error)."""


class UnknownTestError(DefinitionError, LookupError):
    """Raised when execution is requested for a name with no test defined."""

    def __init__(self, name: str, namespace: str | None = None) -> None:
        self.name = name
        self.namespace = namespace
        message = f"No test defined for {name!r}"
        if namespace is not None:
            message += f" in namespace {namespace!r}"
        super().__init__(message)


class UnknownCheckKindError(DefinitionError, LookupError):
    """Raised when an assertion names a check kind nobody registered."""

    def __init__(self, kind: str, available: Iterable[str] = ()) -> None:
        self.kind = kind
        self.available = sorted(available)
        message = f"Unknown check kind: {kind!r}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


__all__ = [
    "DefinitionError",
    "UnknownCheckKindError",
    "UnknownTestError",
    "VerdictError",
]
