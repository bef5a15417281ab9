"""Logging configuration for the application."""

import logging
import sys

from showcase.config import Settings


def setup_logging(settings: Settings) -> int:
    """Configure application logging.

    Args:
        settings: Application settings

    Returns:
        The level applied to the application loggers
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Third-party loggers stay quiet unless debugging
    for name in ("sqlalchemy.engine", "asyncpg", "httpx", "httpcore"):
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)

    logging.getLogger("showcase").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
    return level


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
