"""Shared fixtures for unit tests."""

import io
import uuid

import pytest

from verdict.checks import clear_check_registry
from verdict.config import config_scope
from verdict.testing import drop_registry, get_registry


@pytest.fixture(autouse=True)
def clean_check_registry():
    """Drop checks registered by a test, keeping built-ins."""
    clear_check_registry()
    yield
    clear_check_registry()


@pytest.fixture
def output() -> io.StringIO:
    """Route progress output into a buffer for the duration of a test."""
    buffer = io.StringIO()
    with config_scope(output=buffer, verbose=True):
        yield buffer


@pytest.fixture
def namespace(output):
    """Provide a fresh namespace name, forgotten after the test."""
    name = f"test-{uuid.uuid4().hex}"
    yield name
    drop_registry(name)


@pytest.fixture
def registry(namespace):
    """Provide the registry of a fresh namespace."""
    return get_registry(namespace)
