"""Logging setup for collaborators embedding the split engine"""

import logging
from typing import Optional

from split_engine.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a stream handler to the split_engine logger.

    Calling it again only updates the level.

    Args:
        settings: Settings to read log_level from (default: cached settings)

    Returns:
        The package logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger("split_engine")
    logger.setLevel(settings.log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
