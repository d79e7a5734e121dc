"""
Configure logging for the application.

The ``hostess`` logger writes to stdout and, when the ``logs`` directory can be
created, to a rotating file. The level comes from the explicit argument, else
the LOG_LEVEL environment variable read at call time, so a level chosen by the
launcher survives the server importing the application module.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from hostess.config.constants import LOGGER_NAME

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_DIR = Path("logs")
LOG_FILE = LOG_DIR / "hostess.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (or LOG_LEVEL) to a logging constant, defaulting to INFO."""
    name = (level or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the hostess logger.

    Args:
        level: Level name; falls back to LOG_LEVEL, then INFO

    Returns:
        logging.Logger: The configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    # Reconfiguring replaces handlers rather than stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    file_error = None
    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(
            RotatingFileHandler(LOG_FILE, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT)
        )
    except OSError as e:
        file_error = e

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    if file_error is not None:
        logger.warning(f"Could not set up file logging: {file_error}")
    logger.debug(f"Logging configured at {logging.getLevelName(logger.level)}")
    return logger
