"""Console logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "terrain_client"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a rich handler to the package logger, replacing any earlier one."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
