"""
Provides support for logging
"""

import logging
import time
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def to_log_level(level: int | str) -> int:
    """
    Resolves a log level specified either as an int or as a level name, e.g., "DEBUG", "info"

    :exception ValueError: if the level name is not a standard logging level name
    """
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"invalid log level: {level}")
    return resolved


def configure_logging(
    level: int | str = logging.WARNING,
    handlers: list[logging.Handler] | None = None,
):
    """
    Configures logging format and log level.

    :param level: default = logging.WARNING
    :return: None

    - log format: %(asctime)s [%(levelname)s] [%(name)s] %(message)s
    - timestamps are UTC
    - wallet secrets, i.e., seeds, recovery phrases, and passphrases, are never logged

    >>> configure_logging(level="DEBUG")
    >>> logger = logging.getLogger('Wallet')
    >>> logger.debug('derived account: index=0') # doctest: +SKIP
    2026-10-18 14:48:20,594 [DEBUG] [Wallet] derived account: index=0

    """
    logging.Formatter.converter = time.gmtime
    logging.basicConfig(
        format=LOG_FORMAT,
        level=to_log_level(level),
        handlers=handlers,
        force=True,
    )
    logging.captureWarnings(True)


def get_logger(obj: Any, name: str | None = None) -> logging.Logger:
    """
    Returns a logger using the class name as the logger name.
    If `name` is specifed, then it is appended to the class name: `{self.__class__.__name__}.{name}`
    """
    logger = logging.getLogger(obj.__class__.__name__)
    if name is None:
        return logger

    return logger.getChild(name)
