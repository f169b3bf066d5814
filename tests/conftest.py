"""Shared test configuration."""

import os

# Must be set before app.core.config.get_settings() is first called
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from app.services.engines.dispatcher import CipherDispatcher  # noqa: E402


@pytest.fixture
def dispatcher():
    return CipherDispatcher()
