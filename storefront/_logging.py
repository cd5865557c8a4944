"""
Logging setup (loguru).

Library code logs through the shared loguru `logger`; applications call
configure_logging() once at startup.
"""

from __future__ import annotations

import sys

from loguru import logger

from storefront._config import Settings, get_settings

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | {message} | {extra}"
)


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logger.remove()
    if settings.log_json:
        logger.add(sys.stderr, level=settings.log_level, serialize=True)
    else:
        logger.add(sys.stderr, level=settings.log_level, format=_FORMAT)


__all__ = ("configure_logging", "logger")
