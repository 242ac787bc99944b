"""Logging setup for the ppx-install command."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def level_for(verbosity: int) -> int:
    """Map -q/-v counts to a logging level (negative is quieter)."""
    if verbosity < 0:
        return logging.WARNING
    if verbosity == 0:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """
    Configure the ``ppx_install`` logger.

    Each call sets the level and leaves exactly one handler, writing to the
    current ``sys.stderr``.
    """
    logger = logging.getLogger("ppx_install")
    logger.setLevel(level_for(verbosity))

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    previous = getattr(logger, "_ppx_handler", None)
    if previous is not None:
        logger.removeHandler(previous)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    setattr(logger, "_ppx_handler", handler)
    return logger
