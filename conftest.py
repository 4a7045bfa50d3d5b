"""Shared pytest fixtures and configuration for all tests."""

import pytest

from serialscrape import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the (possibly monkeypatched) environment per test."""
    reset_settings()
    yield
    reset_settings()
