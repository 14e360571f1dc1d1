"""
Collector Package - Query Execution and Result Mapping.

    - UserStatCollector: runs the USER_STATISTICS query and updates the store
    - collect_in_parallel: run-then-join utility for query functions
"""

from mysql_userstat.collector.parallel import collect_in_parallel
from mysql_userstat.collector.userstat import USER_STATISTICS_QUERY, UserStatCollector

__all__ = ["USER_STATISTICS_QUERY", "UserStatCollector", "collect_in_parallel"]
