"""
Observability Package - Logging.

    - configure_logging: structlog + stdlib logging setup
"""

from mysql_userstat.observability.logging_setup import configure_logging

__all__ = ["configure_logging"]
