"""
Error Taxonomy.

    - DatabaseConnectionError: fatal to construction, propagated
    - QueryError: logged, collection cycle skipped
    - ParseError: logged, one gauge left stale
    - WriteError: propagated to the renderer's caller
"""

from __future__ import annotations

from typing import Optional


class UserStatError(Exception):
    """Base class for all collector errors."""
    pass


class DatabaseConnectionError(UserStatError):
    """Raised when the database handle cannot be established."""
    pass


class QueryError(UserStatError):
    """Raised when the statistics query fails or returns no rows."""

    def __init__(self, message: str, query: Optional[str] = None) -> None:
        super().__init__(message)
        self.query = query


class ParseError(UserStatError):
    """Raised for a numeric cell that is not a base-10 integer."""

    def __init__(self, user: str, column: str, value: Optional[str]) -> None:
        super().__init__(
            f"cannot parse {column}={value!r} for user {user!r} as integer"
        )
        self.user = user
        self.column = column
        self.value = value


class WriteError(UserStatError):
    """Raised when the output sink rejects a write."""

    def __init__(self, message: str, lines_written: int = 0) -> None:
        super().__init__(message)
        self.lines_written = lines_written
