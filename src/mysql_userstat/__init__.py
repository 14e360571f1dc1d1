"""
MySQL User Statistics Collector.

Polls ``INFORMATION_SCHEMA.USER_STATISTICS`` on a MySQL server and
republishes per-user connection metrics as gauges, rendered as flat
``metric_name value`` lines for Graphite-style consumers.

Architecture:
    - Ports & Adapters: the database and metrics registry are injected
    - A lock-guarded per-user metric store shared by collection and rendering
    - Configuration-driven behavior via YAML

Main Components:
    - domain: UserMetrics and the MetricKind enumeration
    - interfaces: Protocols for the database and metrics registry
    - adapters: MySQL, mock database and in-memory registry
    - store: MetricStore (ensure/get/snapshot)
    - collector: UserStatCollector and the parallel query runner
    - formatting: Graphite text rendering
    - config: Configuration models and loaders

Example:
    >>> import sys
    >>> from mysql_userstat import UserStatCollector, InMemoryMetricsRegistry
    >>> collector = UserStatCollector.from_credentials(
    ...     InMemoryMetricsRegistry(), "monitor", "secret", "db01"
    ... )
    >>> collector.collect()
    >>> collector.format_graphite(sys.stdout.buffer)
"""

from mysql_userstat.adapters.metrics_registry import InMemoryMetricsRegistry
from mysql_userstat.collector.userstat import UserStatCollector
from mysql_userstat.domain.entities import Gauge, MetricKind, UserMetrics
from mysql_userstat.errors import (
    DatabaseConnectionError,
    ParseError,
    QueryError,
    UserStatError,
    WriteError,
)
from mysql_userstat.formatting.graphite import format_graphite
from mysql_userstat.observability.logging_setup import configure_logging
from mysql_userstat.store.metric_store import MetricStore

__version__ = "0.1.0"

__all__ = [
    "DatabaseConnectionError",
    "Gauge",
    "InMemoryMetricsRegistry",
    "MetricKind",
    "MetricStore",
    "ParseError",
    "QueryError",
    "UserMetrics",
    "UserStatCollector",
    "UserStatError",
    "WriteError",
    "configure_logging",
    "format_graphite",
]
