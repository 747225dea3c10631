"""Logging setup shared by the console entry point and scripts."""

from __future__ import annotations

import logging
import sys

from .config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single stderr handler on the usermgr logger."""
    settings = get_settings()
    logger = logging.getLogger("usermgr")
    logger.setLevel((level or settings.log_level).upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
