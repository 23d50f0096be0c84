"""Pytest configuration and shared fixtures for optionkit tests."""

import logging

import pytest
import structlog

from optionkit import clear_log_hooks, reset_config


class Counter:
    """Counts evaluations of suppliers handed to lazy combinators."""

    def __init__(self) -> None:
        self.calls = 0

    def supply(self, value):
        """Return a zero-argument supplier that counts its calls."""

        def supplier():
            self.calls += 1
            return value

        return supplier


@pytest.fixture
def counter():
    """A fresh evaluation counter."""
    return Counter()


@pytest.fixture(autouse=True)
def _reset_optionkit():
    """Leave no configuration, hooks or logging setup behind."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_config()
    clear_log_hooks()
    structlog.reset_defaults()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from optionkit import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from optionkit import Nothing

    return Nothing
