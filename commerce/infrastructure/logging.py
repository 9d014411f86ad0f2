"""
Logging infrastructure.

Provides logging utilities for every layer outside the domain.
"""
import logging

from commerce.settings import get_settings


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Installs one stream handler per logger, using the level and format from
    LoggingSettings.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        settings = get_settings().logging
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(handler)
        logger.setLevel(settings.level.upper())
    return logger
