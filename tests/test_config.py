# tests/test_config.py

import logging

from core.config import LOGGER_NAME, configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("models.roster").name == "roster.models.roster"


def test_configure_logging_is_repeatable():
    logger = configure_logging(logging.DEBUG)
    configure_logging(logging.DEBUG)

    try:
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
