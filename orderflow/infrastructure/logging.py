"""
Logging infrastructure.

Provides logging utilities for the composition root and demos.
"""
import logging
from typing import Union


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Get logger instance.

    A stream handler is attached the first time a given logger is requested.

    Args:
        name: Logger name (usually module name)
        level: Logging level, as a number or a name such as "DEBUG"

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
