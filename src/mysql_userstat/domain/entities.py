"""
Core Domain Entities.

This module defines the fundamental entities of the user statistics
domain: the gauge value holder, the three metric kinds reported per
user, and the per-user bundle of gauges.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Dict


class MetricKind(Enum):
    """
    The metrics reported for each MySQL user.

    Each member carries the USER_STATISTICS column it is read from and
    the name it is published under. Declaration order is rendering order.
    """

    TOTAL_CONNECTIONS = ("total_connections", "TotalConnections")
    CONCURRENT_CONNECTIONS = ("concurrent_connections", "ConcurrentConnections")
    CONNECTED_TIME = ("connected_time", "ConnectedTime")

    def __init__(self, column: str, metric_name: str) -> None:
        self.column = column
        self.metric_name = metric_name


class Gauge:
    """A named float holding the last value set."""

    def __init__(self, name: str, value: float = 0.0) -> None:
        self.name = name
        self._value = float(value)
        self._lock = Lock()

    def set(self, value: float) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = float(value)

    def get(self) -> float:
        """Return the current value."""
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"Gauge(name={self.name!r}, value={self.get()!r})"


@dataclass(frozen=True)
class UserMetrics:
    """Gauges for one observed MySQL user account."""

    total_connections: Gauge
    concurrent_connections: Gauge
    connected_time: Gauge

    def gauge(self, kind: MetricKind) -> Gauge:
        """Return the gauge backing ``kind``."""
        if kind is MetricKind.TOTAL_CONNECTIONS:
            return self.total_connections
        if kind is MetricKind.CONCURRENT_CONNECTIONS:
            return self.concurrent_connections
        if kind is MetricKind.CONNECTED_TIME:
            return self.connected_time
        raise ValueError(f"Unknown metric kind: {kind!r}")

    def values(self) -> Dict[MetricKind, float]:
        """Current value of every gauge, in rendering order."""
        return {kind: self.gauge(kind).get() for kind in MetricKind}
