"""Shared pytest fixtures."""

from datetime import datetime

import pytest

from strfparse.core import validators


@pytest.fixture
def fixed_now(monkeypatch):
    """Pin the validator's notion of "now" to a known instant."""
    now = datetime(2030, 6, 15, 12, 0, 0)
    monkeypatch.setattr(validators, "_current_time", lambda: now)
    return now
