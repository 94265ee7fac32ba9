# gecs_events/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs go to stderr (stdout carries the event dump) and, when LOG_FILE is set,
to a rotating file.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from gecs_events.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()

_configured = False


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler — stderr only, never mixed into the dump
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.NOTSET)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    root.addHandler(console)

    if settings.LOG_FILE:
        log_dir = os.path.dirname(os.path.abspath(settings.LOG_FILE))
        os.makedirs(log_dir, exist_ok=True)
        # Rotating file handler — keeps last 10 × 5MB log files
        file_handler = RotatingFileHandler(
            filename=settings.LOG_FILE,
            maxBytes=5 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.NOTSET)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)


def set_level(level: str) -> None:
    """Override the root log level (used by the --log-level CLI option)."""
    _configure_root_logger()
    logging.getLogger().setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
