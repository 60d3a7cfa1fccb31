import logging

import pytest


@pytest.fixture
def package_logger():
    """The selector_builder logger, restored to its prior handlers and level afterwards"""
    logger = logging.getLogger("selector_builder")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
