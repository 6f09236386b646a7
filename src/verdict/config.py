"""Process-wide settings: where progress goes and how much of it.

The settings live in a context variable so :func:`config_scope` can swap them
for a block and restore them afterwards. They are still process-wide state;
driving the engine from several threads at once is not supported.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, TextIO

from dotenv import load_dotenv


DEFAULT_NAMESPACE = "default"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class VerdictConfig:
    """Runtime settings for test execution.

    Attributes
    ----------
    output
        Writable text sink for progress lines and diagnostics. ``None`` means
        whatever ``sys.stdout`` is at the time of writing.
    verbose
        Print failure and error diagnostics as tests run. The pass/fail value
        returned to the caller does not depend on it.
    namespace
        Suite the CLI runs when none is given on the command line.
    """

    output: TextIO | None = None
    verbose: bool = True
    namespace: str = DEFAULT_NAMESPACE

    @property
    def stream(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout


DEFAULT_CONFIG = VerdictConfig()

CONFIG_CONTEXT: ContextVar[VerdictConfig] = ContextVar("verdict_config", default=DEFAULT_CONFIG)


def get_config() -> VerdictConfig:
    """Return the settings currently in effect."""
    return CONFIG_CONTEXT.get()


def configure(**changes: Any) -> VerdictConfig:
    """Change the process-wide settings and return the new value."""
    config = replace(CONFIG_CONTEXT.get(), **changes)
    CONFIG_CONTEXT.set(config)
    return config


@contextmanager
def config_scope(**changes: Any) -> Iterator[VerdictConfig]:
    """Apply settings for the duration of a block."""
    config = replace(CONFIG_CONTEXT.get(), **changes)
    token = CONFIG_CONTEXT.set(config)
    try:
        yield config
    finally:
        CONFIG_CONTEXT.reset(token)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    msg = f"{name} must be a boolean, got {raw!r}"
    raise ValueError(msg)


def load_config(environ: Mapping[str, str] | None = None) -> VerdictConfig:
    """Build settings from ``VERDICT_*`` environment variables.

    A ``.env`` file is loaded first when reading the real environment.
    Unset variables fall back to :data:`DEFAULT_CONFIG`.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config = DEFAULT_CONFIG
    if "VERDICT_VERBOSE" in environ:
        config = replace(config, verbose=_parse_bool("VERDICT_VERBOSE", environ["VERDICT_VERBOSE"]))
    namespace = environ.get("VERDICT_NAMESPACE")
    if namespace:
        config = replace(config, namespace=namespace)
    return config


__all__ = [
    "CONFIG_CONTEXT",
    "DEFAULT_CONFIG",
    "DEFAULT_NAMESPACE",
    "VerdictConfig",
    "config_scope",
    "configure",
    "get_config",
    "load_config",
]
