"""Pytest configuration."""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path (tests live inside the package)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from phrasebind.core.config_loader import reset_settings  # noqa: E402
from phrasebind.core.logging_utils import get_logger_stats  # noqa: E402
from phrasebind.core.reducer import polyglot_reducer  # noqa: E402
from phrasebind.core.store import combine_reducers, create_store  # noqa: E402

PHRASES = {
    "hello": "hello",
    "scope1": {"hello": "hello2"},
    "scope2": {"hello": "hello3"},
}


def dummy_reducer(state, action):
    """Unrelated slice that changes on every DUMMY action."""
    if state is None:
        state = ""
    return action.payload if action.type == "DUMMY" else state


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from process-wide settings and environment."""
    monkeypatch.delenv("PHRASEBIND_ENV", raising=False)
    monkeypatch.delenv("PHRASEBIND_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def store():
    """Store with a polyglot slice and an unrelated dummy slice."""
    reducer = combine_reducers({"polyglot": polyglot_reducer, "dummy": dummy_reducer})
    return create_store(reducer, {"polyglot": {"locale": "en", "phrases": PHRASES}})


@pytest.fixture
def phrases():
    """Phrase tree preloaded into the store fixture."""
    return PHRASES


@pytest.fixture(autouse=True)
def capture_library_logs(caplog):
    """Attach caplog to phrasebind loggers, which do not propagate to root."""
    loggers = [logging.getLogger(name) for name in get_logger_stats()["loggers"]]
    for logger in loggers:
        logger.addHandler(caplog.handler)
    yield
    for logger in loggers:
        logger.removeHandler(caplog.handler)
