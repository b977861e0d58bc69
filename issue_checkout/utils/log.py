"""Logging configuration for gfc."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "issue_checkout"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Configure package logging.

    Console logs go to stderr so stdout only carries the result line.
    Calling this again replaces the previous handlers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(getattr(logging, level.upper()))

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(file_handler)
        # File log always gets the debug trail
        logger.setLevel(logging.DEBUG)

    logger.propagate = False
