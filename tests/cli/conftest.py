"""Fixtures for CLI tests."""

import platformdirs
import pytest
from click.testing import CliRunner

from strfparse.core.logging import logger


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """Send CLI log files to a temporary directory."""
    monkeypatch.setattr(
        platformdirs, "user_log_path", lambda *args, **kwargs: tmp_path
    )
    yield tmp_path
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def runner():
    """Return a Click test runner."""
    return CliRunner()
