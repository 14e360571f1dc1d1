"""
Metric Store - Thread-Safe Per-User Metric Mapping.

Holds one UserMetrics entry per observed username. Entries are created
lazily by ``ensure`` and are never removed, so a user that disappears
from the server keeps reporting its last observed values.

Usage:
    store = MetricStore()
    metrics = store.ensure("alice")
    metrics.connected_time.set(345)

    for username, metrics in store.snapshot():
        ...
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Dict, List, Optional, Tuple

from mysql_userstat.domain.entities import Gauge, MetricKind, UserMetrics

logger = logging.getLogger(__name__)

UserMetricsFactory = Callable[[str], UserMetrics]


def standalone_user_metrics(username: str) -> UserMetrics:
    """Build a UserMetrics whose gauges are not attached to any registry."""
    return UserMetrics(
        total_connections=Gauge(f"{username}.{MetricKind.TOTAL_CONNECTIONS.metric_name}"),
        concurrent_connections=Gauge(
            f"{username}.{MetricKind.CONCURRENT_CONNECTIONS.metric_name}"
        ),
        connected_time=Gauge(f"{username}.{MetricKind.CONNECTED_TIME.metric_name}"),
    )


class MetricStore:
    """
    Mapping from username to UserMetrics guarded by a single lock.

    The existence check and the insert in ``ensure`` happen under the
    same lock acquisition, so concurrent callers never create two
    entries for one username. Gauge values are set outside the lock;
    each gauge serializes its own reads and writes.
    """

    def __init__(self, factory: Optional[UserMetricsFactory] = None) -> None:
        """
        Initialize an empty store.

        Args:
            factory: Builds the UserMetrics for a new username
        """
        self._factory = factory or standalone_user_metrics
        self._users: Dict[str, UserMetrics] = {}
        self._lock = Lock()

    def ensure(self, username: str) -> UserMetrics:
        """
        Return the entry for ``username``, creating it if absent.

        Args:
            username: MySQL account name, non-empty

        Returns:
            The single UserMetrics for this username
        """
        with self._lock:
            metrics = self._users.get(username)
            if metrics is None:
                metrics = self._factory(username)
                self._users[username] = metrics
                logger.debug(f"Tracking new user {username!r}")
            return metrics

    def get(self, username: str) -> Tuple[Optional[UserMetrics], bool]:
        """
        Look up ``username`` without creating it.

        Returns:
            (metrics, found); metrics is None when not found
        """
        with self._lock:
            metrics = self._users.get(username)
        return metrics, metrics is not None

    def snapshot(self) -> List[Tuple[str, UserMetrics]]:
        """Copy the (username, metrics) pairs under the lock."""
        with self._lock:
            return list(self._users.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._users
