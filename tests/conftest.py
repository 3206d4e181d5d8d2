"""Shared fixtures for the test suite."""

import pytest

from src.shared import config

SETTINGS_ENV_VARS = [
    "SMOOTHING_METHOD",
    "SMA_BUFFER_SIZE",
    "EMA_ALPHA",
    "ACTIVITY_TYPE",
    "LOCALE",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear settings environment variables and the cached settings singleton."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    monkeypatch.setitem(config.Settings.model_config, "env_file", None)
    return monkeypatch
