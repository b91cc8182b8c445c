"""Opt-in debug logging.

The viewer owns the terminal, so records only ever go to a file. Logging
stays silent unless a path is given or ``LABELJUMP_DEBUG_LOG`` is set.
"""

from __future__ import annotations

import logging
import os

DEBUG_LOG_ENV = "LABELJUMP_DEBUG_LOG"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(path: str | None = None) -> logging.Handler | None:
    """Attach a DEBUG file handler to the ``labeljump`` logger when requested.

    Calling again with the same target reuses the attached handler. Raises
    ``OSError`` when the log file cannot be opened.
    """
    target = path or os.environ.get(DEBUG_LOG_ENV)
    logger = logging.getLogger("labeljump")
    if not target:
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return None

    filename = os.path.abspath(os.path.expanduser(target))
    for existing in logger.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == filename:
            return existing

    handler = logging.FileHandler(filename, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler
