"""Tests for verdict.config."""

import io
import sys

import pytest

from verdict.config import (
    DEFAULT_CONFIG,
    DEFAULT_NAMESPACE,
    config_scope,
    configure,
    get_config,
    load_config,
)


def test_defaults():
    assert DEFAULT_CONFIG.verbose is True
    assert DEFAULT_CONFIG.output is None
    assert DEFAULT_CONFIG.namespace == DEFAULT_NAMESPACE


def test_stream_defaults_to_current_stdout():
    assert DEFAULT_CONFIG.stream is sys.stdout


def test_config_scope_restores():
    buffer = io.StringIO()
    before = get_config()

    with config_scope(output=buffer, verbose=False) as config:
        assert get_config() is config
        assert get_config().stream is buffer
        assert get_config().verbose is False

    assert get_config() is before


def test_configure_is_process_wide():
    before = get_config()
    try:
        configure(verbose=False)
        assert get_config().verbose is False
    finally:
        configure(output=before.output, verbose=before.verbose, namespace=before.namespace)


def test_unknown_setting_rejected():
    with pytest.raises(TypeError):
        configure(colour=True)


class TestLoadConfig:
    def test_empty_environment_gives_defaults(self):
        assert load_config({}) == DEFAULT_CONFIG

    def test_reads_verbose_and_namespace(self):
        config = load_config({"VERDICT_VERBOSE": "no", "VERDICT_NAMESPACE": "smoke"})

        assert config.verbose is False
        assert config.namespace == "smoke"

    def test_invalid_boolean(self):
        with pytest.raises(ValueError, match="VERDICT_VERBOSE"):
            load_config({"VERDICT_VERBOSE": "sometimes"})
