"""Shared fixtures."""

import pytest

from constants import Constants

_TUNABLES = (
    "REGISTRY_URL_NPM",
    "REQUEST_TIMEOUT",
    "YARN_COMMAND",
    "NODE_COMMAND",
)


@pytest.fixture
def restore_constants(monkeypatch):
    """Snapshot mutable Constants so a test's config changes are undone."""
    for attr in _TUNABLES:
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))
    monkeypatch.delenv(Constants.ENV_REGISTRY_URL, raising=False)
    monkeypatch.delenv(Constants.ENV_CONFIG, raising=False)
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "INFO")
    yield Constants
