"""Pytest configuration file with a fixture isolating the process-wide config."""

import pytest

from polykit.config import PRECISION_ENV_VAR, reset_default_config


@pytest.fixture(autouse=True)
def _clean_default_config(monkeypatch):
    """Runs every test against the built-in default precision."""
    monkeypatch.delenv(PRECISION_ENV_VAR, raising=False)
    reset_default_config()
    yield
    reset_default_config()
