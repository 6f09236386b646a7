"""CLI module for the verdict test runner."""

from __future__ import annotations

import argparse
import importlib
import logging
import os
import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import replace

from rich.console import Console
from rich.markup import escape

from verdict.config import VerdictConfig, config_scope, load_config
from verdict.errors import DefinitionError
from verdict.testing.registry import get_registry


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for verdict CLI."""
    config = load_config()
    parser = _build_parser()
    args = parser.parse_args(argv)
    raise SystemExit(_run(args, config))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="verdict", description="Run tests defined with verdict")
    parser.add_argument("modules", nargs="+", help="Modules to import; importing them defines the tests")
    parser.add_argument("-n", "--namespace", help="Namespace to run (default: from config)")
    parser.add_argument("-k", "--keyword", help="Only run tests whose name matches this expression")
    parser.add_argument(
        "-t",
        "--test",
        dest="tests",
        action="append",
        help="Run only the named test (repeatable)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print failure diagnostics")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output")
    return parser


def _resolve_config(args: argparse.Namespace, config: VerdictConfig) -> VerdictConfig:
    if args.namespace:
        config = replace(config, namespace=args.namespace)
    if args.quiet:
        config = replace(config, verbose=False)
    return config


def _configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity > 1 else logging.INFO if verbosity == 1 else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _import_modules(modules: Sequence[str]) -> None:
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    for module in modules:
        importlib.import_module(module)
        logger.info("Imported %s", module)


def _selector(args: argparse.Namespace) -> Callable[[str], bool] | None:
    matchers: list[Callable[[str], bool]] = []
    if args.tests:
        wanted = set(args.tests)
        matchers.append(lambda name: name in wanted)
    if args.keyword:
        matchers.append(KeywordMatcher(args.keyword).match)
    if not matchers:
        return None
    return lambda name: all(match(name) for match in matchers)


def _run(args: argparse.Namespace, config: VerdictConfig) -> int:
    _configure_logging(args.verbose)
    config = _resolve_config(args, config)
    console = Console(file=config.stream, highlight=False, soft_wrap=True)

    try:
        select = _selector(args)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    with config_scope(output=config.output, verbose=config.verbose, namespace=config.namespace):
        try:
            _import_modules(args.modules)
        except ImportError as exc:
            console.print(f"[red]Could not import {escape(str(exc.name or exc))}[/red]")
            return 2
        except DefinitionError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            return 2

        registry = get_registry(config.namespace)
        if args.tests:
            missing = [name for name in args.tests if name not in registry]
            if missing:
                console.print(f"[red]No test defined for {escape(', '.join(missing))}[/red]")
                return 2
        if not len(registry):
            console.print(f"[yellow]No tests defined in namespace {escape(config.namespace)}[/yellow]")
            return 0

        try:
            result = registry.run_all(select=select)
        except DefinitionError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            return 2

    return 0 if result.passed else 1


class KeywordMatcher:
    """Match test names against a ``-k`` expression.

    Words match as case-insensitive substrings of the name and combine with
    ``and``, ``or``, ``not`` and parentheses, e.g. ``"math and not slow"``.
    """

    _TOKEN = re.compile(r"\(|\)|[^\s()]+")

    def __init__(self, expression: str) -> None:
        self.tokens = self._TOKEN.findall(expression)
        self.pos = 0
        self.predicate = self._expression()
        if self.pos != len(self.tokens):
            msg = f"Unexpected {self.tokens[self.pos]!r} in keyword expression"
            raise ValueError(msg)

    def match(self, name: str) -> bool:
        return self.predicate(name.lower())

    def _take(self, word: str) -> bool:
        if self.pos < len(self.tokens) and self.tokens[self.pos].lower() == word:
            self.pos += 1
            return True
        return False

    def _expression(self) -> Callable[[str], bool]:
        terms = [self._conjunction()]
        while self._take("or"):
            terms.append(self._conjunction())
        return terms[0] if len(terms) == 1 else lambda name: any(term(name) for term in terms)

    def _conjunction(self) -> Callable[[str], bool]:
        factors = [self._negation()]
        while self._take("and"):
            factors.append(self._negation())
        return factors[0] if len(factors) == 1 else lambda name: all(factor(name) for factor in factors)

    def _negation(self) -> Callable[[str], bool]:
        if self._take("not"):
            inner = self._negation()
            return lambda name: not inner(name)
        return self._atom()

    def _atom(self) -> Callable[[str], bool]:
        if self.pos == len(self.tokens):
            msg = "Keyword expression ends early"
            raise ValueError(msg)
        if self._take("("):
            inner = self._expression()
            if not self._take(")"):
                msg = "Missing ')' in keyword expression"
                raise ValueError(msg)
            return inner
        word = self.tokens[self.pos]
        if word == ")" or word.lower() in ("and", "or"):
            msg = f"Unexpected {word!r} in keyword expression"
            raise ValueError(msg)
        self.pos += 1
        needle = word.lower()
        return lambda name: needle in name


__all__ = ["KeywordMatcher", "main"]
