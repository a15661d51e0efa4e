"""
Unit test configuration for tmuxfeed.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_tmuxfeed_logging():
    """CLI invocations install handlers on the tmuxfeed logger; drop them."""
    yield
    logger = logging.getLogger("tmuxfeed")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
