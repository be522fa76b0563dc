"""Logging setup for the ``resume-export`` command line."""

from __future__ import annotations

import logging
import sys

__all__ = ["configure_logging"]

DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route log records to stderr.

    Subsequent calls replace the handlers installed by earlier ones.

    Args:
        level: Level number or name (``"DEBUG"``, ``"INFO"``, ...).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    format_str = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_str))
    root_logger.addHandler(console_handler)

    logging.getLogger("resume_export").setLevel(level)
