"""Shared pytest fixtures."""

import sys

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore a plain stderr loguru handler after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
