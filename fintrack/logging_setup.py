"""Logging configuration for fintrack.

``configure_logging`` attaches a single rich handler to the package root
logger (``"fintrack"``) and is called once by the CLI. Library modules only
call ``get_logger`` and never attach handlers themselves.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_PKG_LOGGER_NAME = "fintrack"
_CONFIGURED = False


def parse_level(level: int | str | None) -> int:
    """Convert a level name or number to a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.WARNING


def configure_logging(level: int | str | None = None) -> None:
    """Configure the package root logger exactly once.

    Args:
        level: Level as int or name (e.g. "DEBUG"). Defaults to WARNING.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    numeric_level = parse_level(level)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(numeric_level)

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping library use silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
