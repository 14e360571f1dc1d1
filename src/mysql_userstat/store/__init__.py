"""
Store Package - Per-User Metric State.

    - MetricStore: lock-guarded username -> UserMetrics mapping
"""

from mysql_userstat.store.metric_store import MetricStore

__all__ = ["MetricStore"]
