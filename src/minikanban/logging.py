"""Logging configuration for minikanban."""

import logging
import sys
from pathlib import Path

from . import __version__

LOGGER_NAME = "minikanban"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_for(verbose: int) -> int:
    """-v is INFO, -vv and up is DEBUG; a log file alone records INFO."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the minikanban logger from the verbosity count and log file.

    Calling this again replaces the handlers from the previous call.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose == 0 and log_file is None:
        logger.setLevel(logging.NOTSET)
        return

    level = _level_for(verbose)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    # The TUI owns the terminal, so stderr output is only readable for the
    # headless commands or when stderr is redirected
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        "minikanban %s logging at %s", __version__, logging.getLevelName(level)
    )
