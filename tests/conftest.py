"""
Shared test configuration.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_washer_logger():
    """Undo configure_logging() after each test."""
    washer_logger = logging.getLogger("washer")
    handlers = list(washer_logger.handlers)
    level = washer_logger.level
    propagate = washer_logger.propagate

    yield washer_logger

    washer_logger.handlers[:] = handlers
    washer_logger.setLevel(level)
    washer_logger.propagate = propagate
