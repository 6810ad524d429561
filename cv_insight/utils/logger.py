"""Logging configuration for CV Insight."""

import logging
import sys
from typing import Optional, Union

from cv_insight.config import LOG_LEVEL


def _resolve_level(level: Union[int, str, None]) -> int:
    """Accept a numeric level or a level name such as 'DEBUG'; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "").strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a logger writing to stdout; level defaults to LOG_LEVEL from config."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(LOG_LEVEL))
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
