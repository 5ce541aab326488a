import logging
from typing import Optional

LOGGER_NAME = "sweethttp"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger (or a child of it).

    A NullHandler is attached once so that library users only see records
    when they configure logging themselves.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    if name:
        return logger.getChild(name)
    return logger
