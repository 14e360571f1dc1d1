"""
User Statistics Database Protocol.

Defines the abstract interface for the connection layer. The MySQL
adapter and the mock used in tests both implement it.

The database is responsible for:
    - Running a parameterless query and returning columns by name
    - Receiving errors the collector wants logged
    - Releasing its connections

Design Notes:
    - Implementations must be safe for concurrent use by worker threads
    - Any deadline on a query belongs to the implementation
"""

from __future__ import annotations

from typing import Dict, List, Protocol, runtime_checkable


@runtime_checkable
class UserStatDatabase(Protocol):
    """Abstract interface for the database connection layer."""

    def query_column_dict(self, query: str) -> Dict[str, List[str]]:
        """
        Run ``query`` and return its result column by column.

        Args:
            query: SQL text, no parameters

        Returns:
            Dict mapping lower-cased column name to the ordered list of
            cell values rendered as strings. All lists have equal length.

        Raises:
            QueryError: If the driver reports a failure
        """
        ...

    def log(self, error: BaseException) -> None:
        """
        Record an error raised while collecting.

        Args:
            error: The exception to log
        """
        ...

    def close(self) -> None:
        """Release all connections."""
        ...
