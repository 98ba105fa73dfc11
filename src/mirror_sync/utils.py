"""Utility functions for mirror-sync."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """
    Configure loguru sinks for the application.

    Replaces loguru's default handler with a stderr sink at ``level`` and,
    when ``log_file`` is given, adds a rotating file sink that keeps debug
    output for later inspection.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level="DEBUG",
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )
