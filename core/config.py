# core/config.py

"""
Program-wide settings and logging setup.

The roster takes no file or environment input, so settings are module constants.
Library modules only create named loggers; handlers are attached by the host
program through `configure_logging()`.
"""

import logging

# inclusive bounds for a course grade
GRADE_MIN = 0
GRADE_MAX = 100

LOGGER_NAME = "roster"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Returns a child of the `roster` logger named after the calling module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attaches a console handler to the `roster` logger.

    Args:
        level (int): A `logging` level such as `logging.DEBUG`.

    Returns:
        The configured `roster` logger.

    Notes:
        - Existing handlers are cleared, so repeated calls do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger.addHandler(console_handler)
    return logger
