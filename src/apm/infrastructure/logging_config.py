"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr at *level*.

    Library modules only create loggers; handlers are attached here so
    importing ``apm`` never prints anything on its own.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug("Logging configured at %s", level.upper())
