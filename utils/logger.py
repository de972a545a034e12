# -*- coding: utf-8 -*-
"""
Logging configuration.

One ``aqarat`` logger for the whole engine: a rotating DEBUG file (unless
``LOG_TO_FILE`` is off) and a console handler at ``Config.LOG_LEVEL``.
Modules take a child with ``get_logger(__name__)``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "aqarat"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_logger: Optional[logging.Logger] = None


def _level(name: str, default: int = logging.INFO) -> int:
    """Map a level name from configuration to a logging level."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def setup_logger(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        level: Console level name; defaults to ``Config.LOG_LEVEL``
        log_to_file: Whether to add the rotating file handler; defaults to
            ``Config.LOG_TO_FILE``
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    console_level = _level(level or Config.LOG_LEVEL)
    if log_to_file is None:
        log_to_file = Config.LOG_TO_FILE

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if log_to_file:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``aqarat.controllers.form_controller``."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
