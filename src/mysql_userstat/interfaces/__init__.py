"""
Interfaces Layer - Abstract Protocols for Dependencies.

The collector depends on these abstractions, not on the concrete
MySQL driver or registry implementation.

Protocols:
    - UserStatDatabase: query execution and error logging
    - MetricsRegistry: source of named gauges
"""

from mysql_userstat.interfaces.database import UserStatDatabase
from mysql_userstat.interfaces.metrics_registry import MetricsRegistry

__all__ = ["MetricsRegistry", "UserStatDatabase"]
