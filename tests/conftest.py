"""Shared pytest fixtures for taglog tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_loguru():
    """Keep taglog's loguru diagnostics quiet during tests."""
    logger.disable("taglog")
    yield
    logger.disable("taglog")


@pytest.fixture
def log_path(tmp_path):
    """Path to a log file that does not exist yet."""
    return tmp_path / "app.log"


@pytest.fixture
def existing_log(tmp_path):
    """Log file that already holds a previous run's output."""
    path = tmp_path / "existing.log"
    path.write_text("OLD")
    return path
