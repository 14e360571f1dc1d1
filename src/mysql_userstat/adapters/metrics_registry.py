"""
In-Memory Metrics Registry.

A simple registry that hands out named gauges and keeps them in memory.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Optional

from mysql_userstat.domain.entities import Gauge


class InMemoryMetricsRegistry:
    """Simple in-memory gauge registry."""

    def __init__(self) -> None:
        """Initialize the registry."""
        self._gauges: Dict[str, Gauge] = {}
        self._lock = Lock()

    def gauge(self, name: str) -> Gauge:
        """Return the gauge registered as ``name``, creating it if absent."""
        with self._lock:
            if name not in self._gauges:
                self._gauges[name] = Gauge(name)
            return self._gauges[name]

    def get(self, name: str) -> Optional[Gauge]:
        """Return the gauge registered as ``name``, or None."""
        with self._lock:
            return self._gauges.get(name)

    def get_metrics(self) -> Dict[str, float]:
        """Get the current value of every registered gauge."""
        with self._lock:
            gauges = list(self._gauges.values())
        return {g.name: g.get() for g in gauges}

    def clear(self) -> None:
        """Forget all gauges."""
        with self._lock:
            self._gauges.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._gauges)
