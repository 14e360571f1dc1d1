"""
Domain Layer - Core Entities.

    - MetricKind: the three per-user metrics and their column names
    - Gauge: last-value numeric holder
    - UserMetrics: the gauges of one MySQL user
"""

from mysql_userstat.domain.entities import Gauge, MetricKind, UserMetrics

__all__ = ["Gauge", "MetricKind", "UserMetrics"]
