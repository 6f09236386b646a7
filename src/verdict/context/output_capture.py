"""Scoped substitution of a named output sink.

A sink is named by an owner object and an attribute, ``(sys, "stdout")`` being
the usual one. While captured, writes land in a fresh in-memory buffer. The
original value is put back on every exit path, including errors raised by the
captured code, which then continue to propagate.

Only Python-level writes are captured (``print``, ``sys.stdout.write``), not
output written by subprocesses or C extensions to file descriptors.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


_UNSET = object()


class SinkSwap:
    """Swaps one attribute for a capture buffer and back."""

    def __init__(self, owner: Any, attribute: str) -> None:
        self._owner = owner
        self._attribute = attribute
        self._original: Any = _UNSET
        self.buffer: io.StringIO | None = None

    @property
    def name(self) -> str:
        owner_name = getattr(self._owner, "__name__", type(self._owner).__name__)
        return f"{owner_name}.{self._attribute}"

    @property
    def installed(self) -> bool:
        return self._original is not _UNSET

    def install(self) -> io.StringIO:
        """Replace the sink with a new buffer and return the buffer."""
        if self.installed:
            msg = f"{self.name} is already captured by this swap"
            raise RuntimeError(msg)
        self._original = getattr(self._owner, self._attribute)
        self.buffer = io.StringIO()
        setattr(self._owner, self._attribute, self.buffer)
        return self.buffer

    def uninstall(self) -> None:
        """Restore the original sink."""
        if not self.installed:
            return
        setattr(self._owner, self._attribute, self._original)
        self._original = _UNSET


@contextmanager
def capture_sink(owner: Any = sys, attribute: str = "stdout") -> Iterator[io.StringIO]:
    """Capture writes to ``owner.attribute`` for the duration of the block."""
    swap = SinkSwap(owner, attribute)
    buffer = swap.install()
    try:
        yield buffer
    finally:
        swap.uninstall()


__all__ = ["SinkSwap", "capture_sink"]
