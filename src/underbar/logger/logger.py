"""Global logger configuration for the underbar package."""

import logging
import os
import sys

from underbar.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "underbar",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Modules inside the package log through ``logging.getLogger(__name__)``;
    their records travel up to the handler installed here.

    Args:
        name: Logger name (typically the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back to
            the ``LOG_LEVEL`` environment variable, then to INFO.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Create default logger instance for the package
logger = setup_logger(level=os.getenv("LOG_LEVEL") or settings.LOG_LEVEL)
