"""Shared fixtures for the fuzzbunny test suite."""

import pytest
import structlog

from fixtures.real_data import HEROES, make_catalogue
from fuzzbunny.config import get_settings


@pytest.fixture
def heroes():
    """Heroes character list, in file order."""
    return list(HEROES)


@pytest.fixture
def catalogue():
    """Generated catalogue of 5000 book lines."""
    return make_catalogue(5000)


@pytest.fixture
def fresh_settings():
    """Clear cached settings before and after a test that changes FUZZBUNNY_* env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    """Restore structlog's default configuration after the test."""
    yield
    structlog.reset_defaults()
