"""Shared fixtures for logger tests"""

import io
import logging

import pytest

from nanologger.core import registry as registry_module
from nanologger.core.registry import LoggerRegistry
from nanologger.formatters.colors import clear_colors_override
from nanologger.integrations.stdlib_logging import NanologgerHandler


class FailingWriter:
    """Destination whose every write fails."""

    def write(self, data):
        raise BrokenPipeError("simulated failure")

    def flush(self):
        raise BrokenPipeError("simulated failure")


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    """Give every test its own process-wide logger slot."""
    registry = LoggerRegistry()
    monkeypatch.setattr(registry_module, "_registry", registry)
    monkeypatch.delenv("NANOLOG_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield registry
    clear_colors_override()


@pytest.fixture
def root_logger():
    """Root stdlib logger, restored after the test."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, NanologgerHandler):
            root.removeHandler(handler)
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def failing_writer():
    return FailingWriter()
