"""Tests for the verdict command line."""

import textwrap
import uuid

import pytest

from verdict.cli import KeywordMatcher, main
from verdict.testing import drop_registry


def test_keyword_matcher_supports_boolean_logic():
    matcher = KeywordMatcher("foo and not bar")
    assert matcher.match("foo_case")
    assert not matcher.match("bar_case")
    assert not matcher.match("other")


def test_keyword_matcher_rejects_dangling_operator():
    with pytest.raises(ValueError):
        KeywordMatcher("foo and")


def test_keyword_matcher_groups_without_spaces():
    matcher = KeywordMatcher("(Math or text)and not slow")
    assert matcher.match("math_fast")
    assert matcher.match("TEXT_ok")
    assert not matcher.match("math_slow")


@pytest.mark.parametrize("expression", ["(foo", "foo)", "or foo", ""])
def test_keyword_matcher_rejects_malformed(expression):
    with pytest.raises(ValueError):
        KeywordMatcher(expression)


@pytest.fixture
def suite_module(tmp_path, monkeypatch):
    """Write an importable module defining tests in a fresh namespace."""
    namespace = f"cli-{uuid.uuid4().hex}"
    module = f"suite_{uuid.uuid4().hex}"
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))

    def write(body: str) -> tuple[str, str]:
        source = textwrap.dedent(
            """
            from verdict import assert_equal, define_test

            NS = {namespace!r}
            """
        ).format(namespace=namespace)
        (tmp_path / f"{module}.py").write_text(source + textwrap.dedent(body))
        return module, namespace

    yield write
    drop_registry(namespace)


def run_cli(*argv: str) -> int:
    with pytest.raises(SystemExit) as info:
        main(list(argv))
    return info.value.code


def test_passing_suite_exits_zero(suite_module, capsys):
    module, namespace = suite_module(
        """
        define_test("adds", [assert_equal(lambda: 1 + 1, 2)], namespace=NS)
        """
    )

    assert run_cli(module, "-n", namespace) == 0
    out = capsys.readouterr().out
    assert "adds: OK" in out
    assert "1 test(s) passed" in out


def test_failing_suite_exits_one(suite_module, capsys):
    module, namespace = suite_module(
        """
        define_test("adds", [assert_equal(lambda: 1 + 1, 3)], namespace=NS)
        """
    )

    assert run_cli(module, "-n", namespace) == 1
    out = capsys.readouterr().out
    assert "adds: FAILED" in out
    assert "expected 3" in out


def test_quiet_hides_diagnostics(suite_module, capsys):
    module, namespace = suite_module(
        """
        define_test("adds", [assert_equal(lambda: 1 + 1, 3)], namespace=NS)
        """
    )

    assert run_cli(module, "-n", namespace, "-q") == 1
    out = capsys.readouterr().out
    assert "adds: FAILED" in out
    assert "expected 3" not in out


def test_keyword_selects_tests(suite_module, capsys):
    module, namespace = suite_module(
        """
        define_test("math_ok", [assert_equal(lambda: 1, 1)], namespace=NS)
        define_test("text_broken", [assert_equal(lambda: "a", "b")], namespace=NS)
        """
    )

    assert run_cli(module, "-n", namespace, "-k", "math") == 0
    out = capsys.readouterr().out
    assert "math_ok: OK" in out
    assert "text_broken" not in out


def test_named_test_selection(suite_module, capsys):
    module, namespace = suite_module(
        """
        define_test("first", [assert_equal(lambda: 1, 1)], namespace=NS)
        define_test("second", [assert_equal(lambda: 1, 2)], namespace=NS)
        """
    )

    assert run_cli(module, "-n", namespace, "-t", "first") == 0


def test_unknown_named_test_exits_two(suite_module, capsys):
    module, namespace = suite_module("")

    assert run_cli(module, "-n", namespace, "-t", "missing") == 2
    assert "No test defined for missing" in capsys.readouterr().out


def test_missing_module_exits_two(capsys):
    assert run_cli(f"no_such_module_{uuid.uuid4().hex}") == 2
    assert "Could not import" in capsys.readouterr().out


def test_empty_namespace(suite_module, capsys):
    module, namespace = suite_module("")

    assert run_cli(module, "-n", namespace) == 0
    assert "No tests defined" in capsys.readouterr().out


def test_unknown_kind_in_module_exits_two(suite_module, capsys):
    module, namespace = suite_module(
        """
        from verdict import assertion

        define_test("bad", [assertion("no-such-kind", lambda: 1)], namespace=NS)
        """
    )

    assert run_cli(module, "-n", namespace) == 2
    assert "Unknown check kind" in capsys.readouterr().out


def test_kind_removed_after_definition_exits_two(suite_module, capsys):
    module, namespace = suite_module(
        """
        from verdict import assertion
        from verdict.checks import register_check, unregister_check

        register_check("transient", lambda comparator, producer, expected: (True, None))
        define_test("gone", [assertion("transient", lambda: 1)], namespace=NS)
        unregister_check("transient")
        """
    )

    assert run_cli(module, "-n", namespace) == 2
    assert "Unknown check kind: 'transient'" in capsys.readouterr().out
