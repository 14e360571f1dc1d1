"""
Configuration Package - Models and Loaders.

    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles
    - MYSQL_USERSTAT_PASSWORD overrides database.password

Configuration Structure:
    - UserStatConfig: Root configuration object
    - DatabaseConfig: MySQL connection settings
    - CollectorConfig: Interval and metric prefix
    - LoggingConfig: Level and renderer
"""

from mysql_userstat.config.loader import ConfigLoader, load_config
from mysql_userstat.config.models import (
    CollectorConfig,
    DatabaseConfig,
    LoggingConfig,
    UserStatConfig,
)

__all__ = [
    "CollectorConfig",
    "ConfigLoader",
    "DatabaseConfig",
    "LoggingConfig",
    "UserStatConfig",
    "load_config",
]
