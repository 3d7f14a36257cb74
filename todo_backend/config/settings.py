"""
Application configuration settings.
Defaults live on the pydantic models; environment variables override them.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, field_validator


class DatabaseConfig(BaseModel):
    """Database configuration settings."""

    database_path: str = "data/todos.db"  # Relative to the working directory
    connection_timeout: float = 30


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {value}")
        return level


class ApplicationConfig:
    """Main application configuration."""

    def __init__(
        self,
        database: Optional[DatabaseConfig] = None,
        logging: Optional[LoggingConfig] = None,
    ):
        self.database = database or DatabaseConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_env(cls) -> "ApplicationConfig":
        """Build configuration from TODO_* environment variables."""
        database_values = {}
        if os.environ.get("TODO_DATABASE_PATH"):
            database_values["database_path"] = os.environ["TODO_DATABASE_PATH"]
        if os.environ.get("TODO_DB_TIMEOUT"):
            database_values["connection_timeout"] = os.environ["TODO_DB_TIMEOUT"]

        logging_values = {}
        if os.environ.get("TODO_LOG_LEVEL"):
            logging_values["level"] = os.environ["TODO_LOG_LEVEL"]

        return cls(
            database=DatabaseConfig(**database_values),
            logging=LoggingConfig(**logging_values),
        )

    @property
    def database_path(self) -> str:
        """Get absolute database path."""
        if os.path.isabs(self.database.database_path):
            return self.database.database_path
        return os.path.abspath(self.database.database_path)


# Global configuration instance
app_config = ApplicationConfig.from_env()
