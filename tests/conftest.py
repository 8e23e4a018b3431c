import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_log_handlers():
    yield
    logging.getLogger().handlers = []
