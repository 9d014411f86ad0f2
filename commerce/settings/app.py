# commerce/settings/app.py
from functools import lru_cache

from .database import DatabaseSettings
from .logging import LoggingSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.database = DatabaseSettings()
        self.logging = LoggingSettings()


@lru_cache()
def get_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
