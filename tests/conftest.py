"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def setup_env(monkeypatch):
    """Run every test against the default configuration selection."""
    monkeypatch.delenv('FLASK_ENV', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    yield
