"""Central logging setup: one file handler under the ``uttt`` logger.

The terminal belongs to the renderer, so nothing is ever logged to stderr
while a game is on screen.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import LOG_FILE, LOG_LEVEL

LOGGER_NAME = "uttt"


class PlainFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``uttt`` logger; an empty ``log_file`` disables output."""

    level_name = (level or LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    path = LOG_FILE if log_file is None else log_file

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(log_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if path:
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(PlainFormatter())
        root.addHandler(file_handler)
    else:
        root.addHandler(logging.NullHandler())
    return root


def get_logger(component: str) -> logging.Logger:
    """Return the logger for one component, e.g. ``uttt.board``."""

    return logging.getLogger(f"{LOGGER_NAME}.{component}")
