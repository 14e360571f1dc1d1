"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """Connection settings for the monitored MySQL server."""

    user: str = ""
    password: str = Field(default="", repr=False)
    host: str = "localhost"
    port: int = Field(default=3306, ge=1, le=65535)
    option_file: Optional[str] = None
    max_connections: int = Field(default=5, ge=1)
    connect_timeout: int = Field(default=10, ge=1)


class CollectorConfig(BaseModel):
    """Collection loop settings."""

    interval_seconds: float = Field(default=60.0, gt=0)
    metric_prefix: str = Field(default="mysqlstat", min_length=1)


class LoggingConfig(BaseModel):
    """Log output settings."""

    level: str = "INFO"
    use_json: bool = False


class UserStatConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    collector: CollectorConfig = Field(default_factory=CollectorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
