import logging

import pytest


@pytest.fixture
def clean_warehouse_logger():
    # setup_logger() only configures once per process; start each test bare
    logger = logging.getLogger("warehouse")
    saved = logger.handlers[:]
    for h in saved:
        logger.removeHandler(h)
    yield logger
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    for h in saved:
        logger.addHandler(h)
