"""Logging setup for Labyrinth."""

import logging
from typing import Optional

from labyrinth.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root handler and return the package logger.

    Args:
        level: Logging level name. Defaults to the configured level.

    Returns:
        The "labyrinth" logger.
    """
    settings = get_settings()
    if level is None:
        level = settings.effective_log_level

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logger = logging.getLogger("labyrinth")
    logger.setLevel(level)
    logger.info(f"{settings.app_name} {settings.app_version} logging at {level}")
    return logger
