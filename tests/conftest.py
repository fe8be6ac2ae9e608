"""Pytest configuration and shared fixtures for softlayer-client-core tests."""

import pytest

from softlayer_client_core import set_default_client
from softlayer_client_core.config import ConfigResolver


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear SoftLayer environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("SL_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture(autouse=True)
def clear_default_client():
    """Auto-cleanup: Reset the process-wide default client around each test."""
    set_default_client(None)
    yield
    set_default_client(None)


@pytest.fixture
def resolver():
    """A resolver that ignores config files and .env, reading only the environment."""
    return ConfigResolver(config_files=[], load_dotenv=False)
