"""Package logger for ruby2js.

The only record ruby2js emits is a DEBUG line when the release version is
first published, so the logger defaults to WARNING and stays silent unless
the host application lowers the level on the ``ruby2js`` logger.
"""
from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("ruby2js")
        # Only add a handler if the application hasn't configured logging.
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
            logger.addHandler(handler)
        # a level chosen by the host wins
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.WARNING)
        _LOGGER = logger
    return _LOGGER

__all__ = ["get_logger"]
