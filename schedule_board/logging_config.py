"""
Logging configuration for the ``schedule_board`` namespace.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the package logger with a single stdout handler.

    Args:
        level: Logging level, as an int or a name such as ``"DEBUG"``.
    """
    logger = logging.getLogger("schedule_board")
    logger.setLevel(level)

    # Avoid duplicate output when the app module is re-imported (e.g. uvicorn --reload)
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    logger.debug("Logging initialized.")
