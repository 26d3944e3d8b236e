"""
Application settings and shared logger.

Configuration is read from environment variables. Every module logs through
the `logger` defined here:

    from settings import logger
    logger.info("Something happened", extra={"key": "value"})
"""

import logging
import os
import sys
from typing import Literal
from pydantic import BaseModel, field_validator

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseModel):
    """Runtime configuration for the menu site."""
    mongodb_url: str = "mongodb://127.0.0.1:27017/"
    database_name: str = "testdb"
    server_selection_timeout_ms: int = 5000
    host: str = "0.0.0.0"
    port: int = 8888
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Build settings from the current environment."""
    env = {
        "mongodb_url": os.getenv("MONGODB_URL"),
        "database_name": os.getenv("MONGODB_DATABASE"),
        "server_selection_timeout_ms": os.getenv("MONGODB_TIMEOUT_MS"),
        "host": os.getenv("HOST"),
        "port": os.getenv("PORT"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    return Settings(**{key: value for key, value in env.items() if value is not None})


def setup_logger(level: str) -> logging.Logger:
    """Configure the application logger once."""
    app_logger = logging.getLogger("menu_site")
    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        app_logger.addHandler(handler)
    app_logger.setLevel(level.upper())
    return app_logger


settings = get_settings()
logger = setup_logger(settings.log_level)
