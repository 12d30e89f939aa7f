# tests/conftest.py
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from kefir.core.config import get_settings
from kefir.languages import get_module
from kefir.languages.turkish import TurkishMorphologyEngine


@pytest.fixture
def engine():
    """A fresh Turkish morphology engine."""
    return TurkishMorphologyEngine()


@pytest.fixture
def turkish():
    """The registered Turkish language module."""
    return get_module("tr")


@pytest.fixture
def fresh_settings():
    """
    Drops the cached Settings before and after the test so that
    environment overrides set with monkeypatch take effect.
    """
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def captured_logs():
    """Collects structlog events emitted during the test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def restore_logging():
    """Undoes configure_logging() so later tests see default structlog."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
