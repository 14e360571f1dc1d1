"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols in the interfaces package.

Databases:
    - MySQLDatabase: pooled mysql-connector-python access
    - MockUserStatDatabase: scripted results for development/testing

Metrics:
    - InMemoryMetricsRegistry: gauges kept in memory
"""

from mysql_userstat.adapters.metrics_registry import InMemoryMetricsRegistry
from mysql_userstat.adapters.mock_database import MockUserStatDatabase, rows_to_columns
from mysql_userstat.adapters.mysql_database import MySQLDatabase

__all__ = [
    "InMemoryMetricsRegistry",
    "MockUserStatDatabase",
    "MySQLDatabase",
    "rows_to_columns",
]
