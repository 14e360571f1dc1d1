"""
Mock User Statistics Database.

A fake connection layer for development and testing. Replays scripted
query results (or errors) in order and records everything passed to
log().
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List, Optional, Sequence, Union

from mysql_userstat.errors import QueryError

logger = logging.getLogger(__name__)

ColumnDict = Dict[str, List[str]]
ScriptedResult = Union[ColumnDict, BaseException]


def rows_to_columns(
    rows: Sequence[Sequence[str]],
    columns: Sequence[str] = (
        "user",
        "total_connections",
        "concurrent_connections",
        "connected_time",
    ),
) -> ColumnDict:
    """Turn row tuples into the column dict returned by query_column_dict."""
    result: ColumnDict = {name: [] for name in columns}
    for row in rows:
        for name, value in zip(columns, row):
            result[name].append(value)
    return result


class MockUserStatDatabase:
    """Fake database for development and testing."""

    def __init__(self, results: Optional[Sequence[ScriptedResult]] = None) -> None:
        """
        Initialize mock database.

        Args:
            results: Returned (or raised, for exceptions) by successive
                queries; the last entry repeats once the script runs out
        """
        self._results: List[ScriptedResult] = list(results or [])
        self._lock = Lock()
        self.queries: List[str] = []
        self.logged: List[BaseException] = []
        self.closed = False

    def push(self, result: ScriptedResult) -> None:
        """Append a result to the script."""
        with self._lock:
            self._results.append(result)

    def query_column_dict(self, query: str) -> ColumnDict:
        with self._lock:
            self.queries.append(query)
            if not self._results:
                return {}
            result = self._results.pop(0) if len(self._results) > 1 else self._results[0]

        if isinstance(result, QueryError):
            raise result
        if isinstance(result, BaseException):
            raise QueryError(f"query failed: {result}", query=query) from result
        return {name: list(values) for name, values in result.items()}

    def log(self, error: BaseException) -> None:
        with self._lock:
            self.logged.append(error)
        logger.warning(f"{type(error).__name__}: {error}")

    def close(self) -> None:
        self.closed = True
