"""
Configuration package for application settings.
"""

from .settings import ApplicationConfig, DatabaseConfig, LoggingConfig, app_config
from .database import DatabaseManager
from .logging_setup import setup_logging

__all__ = [
    "ApplicationConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "app_config",
    "DatabaseManager",
    "setup_logging"
]
