"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers in the ``bioneer`` namespace.
    - Let the CLI switch on a stderr handler with a chosen level.

Notes/Edge cases:
    - Library use stays silent: the package logger carries a ``NullHandler``.
    - :func:`configure_logging` is idempotent; repeated calls only adjust the
      level of the handler installed the first time.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = ["PACKAGE_LOGGER", "get_logger", "configure_logging"]

PACKAGE_LOGGER = "bioneer"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_ATTR = "_bioneer_cli_handler"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class _StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger at ``level``."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    handler = next((h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)), None)
    if handler is None:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger
