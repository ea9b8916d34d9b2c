"""Centralized logging configuration."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}::{function}:{line}</>",
        "{message}",
    )
)

DEFAULT_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LEVEL) -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    logger.remove()  # drop the default handler so output is not duplicated
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
