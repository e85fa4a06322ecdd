"""
Logging Configuration
Sets up logging for the password checker, writing to the console and optionally to a file.
"""

import os
import sys
import logging
import logging.config
from pathlib import Path
from typing import Optional

from passcheck.config import get_settings


def setup_logging(log_level: Optional[str] = None, log_dir: Optional[str] = None):
    """
    Configure logging for the passcheck package.

    Args:
        log_level: Logging level. Defaults to the configured log_level.
        log_dir: Directory to store log files. Defaults to the configured
            log_dir; console only when neither is set.
    """
    settings = get_settings()
    log_level = log_level or settings.log_level
    log_dir = log_dir or settings.log_dir

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "default",
            "level": log_level,
        },
    }

    log_file_path = None
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_file_path = os.path.join(log_dir, "passcheck.log")
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file_path,
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "default",
            "level": log_level,
            "encoding": "utf8",
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "passcheck": {
                "handlers": list(handlers),
                "level": log_level,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)

    logger = logging.getLogger("passcheck")
    if log_file_path:
        logger.info(f"Logging initialized. Writing logs to {log_file_path}")
    else:
        logger.info("Logging initialized (console only)")
