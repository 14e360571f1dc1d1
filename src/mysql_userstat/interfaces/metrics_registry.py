"""
Metrics Registry Protocol.

The handle gauges are drawn from. A collector asks it for one gauge per
(user, metric) pair and keeps the returned objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mysql_userstat.domain.entities import Gauge


@runtime_checkable
class MetricsRegistry(Protocol):
    """Abstract interface for a gauge registry."""

    def gauge(self, name: str) -> Gauge:
        """
        Get or create a gauge.

        Args:
            name: Fully qualified metric name (e.g., "mysqlstat.alice.ConnectedTime")

        Returns:
            The gauge registered under ``name``
        """
        ...

    def get_metrics(self) -> Dict[str, float]:
        """
        Get all registered gauges.

        Returns:
            Dict of metric name to current value
        """
        ...
