"""
Global pytest configuration and fixtures for all tests.

Provides:
- Isolation of the cached settings from the process environment
- A clean PWPOLICY_* environment on request
"""

import os

import pytest

from pwpolicy.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings so environment changes made by a test apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PWPOLICY_* variable from the environment."""
    for key in list(os.environ):
        if key.startswith("PWPOLICY_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
