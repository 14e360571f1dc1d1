"""
User Statistics Collector.

Reads INFORMATION_SCHEMA.USER_STATISTICS and keeps one set of gauges per
MySQL user:

    - TotalConnections
    - ConcurrentConnections
    - ConnectedTime (seconds)

Design Notes:
    - A failed or empty query leaves every gauge at its last value
    - A malformed cell leaves only that one gauge stale
    - collect() never raises; errors go to the database's log()
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import IO, Any, Dict, List, Optional

import structlog

from mysql_userstat.adapters.mysql_database import MySQLDatabase
from mysql_userstat.collector.parallel import collect_in_parallel
from mysql_userstat.domain.entities import MetricKind, UserMetrics
from mysql_userstat.errors import ParseError, QueryError
from mysql_userstat.formatting.graphite import format_graphite
from mysql_userstat.interfaces.database import UserStatDatabase
from mysql_userstat.interfaces.metrics_registry import MetricsRegistry
from mysql_userstat.store.metric_store import MetricStore

logger = logging.getLogger(__name__)

USER_STATISTICS_QUERY = (
    "SELECT user, total_connections, concurrent_connections, connected_time "
    "FROM INFORMATION_SCHEMA.USER_STATISTICS;"
)

DEFAULT_PREFIX = "mysqlstat"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_int64(text: Optional[str]) -> int:
    """
    Parse a base-10 signed 64-bit integer.

    Stricter than int(): surrounding whitespace, underscores and
    out-of-range values are rejected.

    Raises:
        ValueError: If ``text`` is not a valid integer
    """
    if text is None or not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


class UserStatCollector:
    """
    Collects per-user connection statistics from one MySQL server.

    Usage:
        registry = InMemoryMetricsRegistry()
        collector = UserStatCollector.from_credentials(registry, "monitor", "pw", "db01")
        collector.collect()
        collector.format_graphite(sys.stdout.buffer)
    """

    def __init__(
        self,
        registry: MetricsRegistry,
        database: UserStatDatabase,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        """
        Initialize collector.

        Args:
            registry: Source of the per-user gauges
            database: Connection layer used for queries and error logging
            prefix: First component of every registered gauge name
        """
        self.registry = registry
        self.database = database
        self.prefix = prefix
        self._store = MetricStore(factory=self._new_user_metrics)

    @classmethod
    def from_credentials(
        cls,
        registry: MetricsRegistry,
        user: str,
        password: str,
        host: str,
        config: Optional[str] = None,
        prefix: str = DEFAULT_PREFIX,
        **pool_options: Any,
    ) -> UserStatCollector:
        """
        Connect to MySQL and build a collector.

        ``user`` and ``password`` may be empty when ``config`` names an
        option file that supplies them.

        Raises:
            DatabaseConnectionError: If the connection cannot be established
        """
        database = MySQLDatabase.connect(
            user=user,
            password=password,
            host=host,
            option_file=config,
            **pool_options,
        )
        return cls(registry, database, prefix=prefix)

    @property
    def store(self) -> MetricStore:
        return self._store

    def _new_user_metrics(self, username: str) -> UserMetrics:
        base = f"{self.prefix}.{username}"
        return UserMetrics(
            total_connections=self.registry.gauge(
                f"{base}.{MetricKind.TOTAL_CONNECTIONS.metric_name}"
            ),
            concurrent_connections=self.registry.gauge(
                f"{base}.{MetricKind.CONCURRENT_CONNECTIONS.metric_name}"
            ),
            connected_time=self.registry.gauge(
                f"{base}.{MetricKind.CONNECTED_TIME.metric_name}"
            ),
        )

    def collect(self) -> None:
        """Run one collection cycle and wait for it to finish."""
        query_funcs = [self.get_user_statistics]
        with structlog.contextvars.bound_contextvars(
            collector="userstat",
            cycle_id=uuid.uuid4().hex[:12],
        ):
            collect_in_parallel(query_funcs)

    def get_user_statistics(self) -> None:
        """Query USER_STATISTICS and apply each row to the store."""
        try:
            result = self.database.query_column_dict(USER_STATISTICS_QUERY)
        except QueryError as exc:
            self.database.log(exc)
            return

        users = result.get("user") or []
        if not users:
            self.database.log(
                QueryError("USER_STATISTICS returned no rows", query=USER_STATISTICS_QUERY)
            )
            return

        for i, user in enumerate(users):
            if not user:
                self.database.log(ParseError(user, "user", user))
                continue
            metrics = self._store.ensure(user)
            for kind in MetricKind:
                raw = self._cell(result, kind.column, i)
                try:
                    value = parse_int64(raw)
                except ValueError as exc:
                    error = ParseError(user, kind.column, raw)
                    error.__cause__ = exc
                    self.database.log(error)
                    continue
                metrics.gauge(kind).set(float(value))

        logger.debug(f"Applied USER_STATISTICS rows for {len(users)} users")

    @staticmethod
    def _cell(result: Dict[str, List[str]], column: str, index: int) -> Optional[str]:
        values = result.get(column)
        if values is None or index >= len(values):
            return None
        return values[index]

    def format_graphite(self, sink: IO[bytes]) -> None:
        """Write ``<user>.<MetricName> <value>`` lines to ``sink``."""
        format_graphite(self._store, sink)

    def close(self) -> None:
        """Release the database connection."""
        self.database.close()
