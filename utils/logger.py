# -*- coding: utf-8 -*-
"""
Logging configuration.

One application logger (Config.LOGGER_NAME) writes to a rotating file and
to stdout. Modules log through children of it, so their records carry the
module path after the application name.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _resolve_level(level: Union[str, int], default: int) -> int:
    """Map a level name such as "info" to its number; unknown names give the default."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def setup_logger(console: bool = True) -> logging.Logger:
    """
    Configure the application logger from Config.

    Safe to call again: existing handlers are closed and replaced.

    Args:
        console: Also log to stdout at Config.CONSOLE_LOG_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    file_level = _resolve_level(Config.LOG_LEVEL, logging.DEBUG)
    console_level = _resolve_level(Config.CONSOLE_LOG_LEVEL, logging.INFO)

    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(min(file_level, console_level) if console else file_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(Config.CONSOLE_LOG_FORMAT))
        logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the application logger for a module."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
