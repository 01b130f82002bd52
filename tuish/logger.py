"""File logging. The terminal belongs to the UI, so nothing goes to stderr."""

import logging
import os
from pathlib import Path
from typing import Optional

import platformdirs

from tuish.config import APP_NAME

LOG_FILENAME = "tuish.log"
LOG_LEVEL_ENV_VAR = "TUISH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_path() -> Path:
    return Path(platformdirs.user_log_dir(APP_NAME)) / LOG_FILENAME


def setup_logging(path: Optional[Path] = None) -> Optional[Path]:
    """Attach a file handler to the package logger.

    Returns the log file path, or None if the log file cannot be opened.
    Calling it again is a no-op.
    """
    logger = logging.getLogger(APP_NAME)
    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler):
                return Path(handler.baseFilename)
        return None

    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(level_name)
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    logger.propagate = False

    path = path or log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # Logging is best effort; the menu works without it
        logger.addHandler(logging.NullHandler())
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return path
