"""Logging configuration for the command-line entry points.

The library modules only create loggers; handlers are installed here, by
the CLI, so embedding applications keep control of their own logging.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


_LOGGER_NAME = "termgrid"


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Attach a single handler to the ``termgrid`` logger.

    A log file is the only safe target while a grid owns the screen; without
    one, records go to stderr through rich.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level.upper())
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger.addHandler(handler)
    logger.propagate = False
    return logger

