# Settings package
from .app import AppSettings, get_settings
from .database import DatabaseSettings
from .logging import LoggingSettings

__all__ = ["AppSettings", "DatabaseSettings", "LoggingSettings", "get_settings"]
