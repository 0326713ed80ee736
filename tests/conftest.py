"""Pytest configuration and fixtures."""

import pytest

from causeway.config import get_settings
from causeway.errors import ContextError, MessageError

ENV_VARS = (
    "CAUSEWAY_LIB_TRACE",
    "CAUSEWAY_TRACE",
    "CAUSEWAY_MAX_CHAIN_DEPTH",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate every test from the caller's causeway configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def build_chain():
    """Build an error chain from messages, outermost first."""

    def _build(*messages):
        error = MessageError(messages[-1])
        for message in reversed(messages[:-1]):
            error = ContextError(message, error)
        return error

    return _build


class CyclicError(MessageError):
    """Error whose source is itself"""

    def source(self):
        return self


@pytest.fixture
def cyclic_error():
    return CyclicError("loops forever")
