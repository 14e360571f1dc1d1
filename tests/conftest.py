"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import pytest
import structlog

from mysql_userstat.adapters.metrics_registry import InMemoryMetricsRegistry
from mysql_userstat.adapters.mock_database import MockUserStatDatabase, rows_to_columns
from mysql_userstat.collector.userstat import UserStatCollector


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging() side effects between tests."""
    root = logging.getLogger()
    package = logging.getLogger("mysql_userstat")
    handlers = list(root.handlers)
    levels = (root.level, package.level)
    yield
    root.handlers[:] = handlers
    root.setLevel(levels[0])
    package.setLevel(levels[1])
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def sample_rows() -> List[Sequence[str]]:
    """Two well-formed USER_STATISTICS rows."""
    return [
        ("alice", "10", "2", "345"),
        ("bob", "7", "0", "12"),
    ]


@pytest.fixture
def registry() -> InMemoryMetricsRegistry:
    """Create metrics registry for testing."""
    return InMemoryMetricsRegistry()


@pytest.fixture
def mock_database(sample_rows) -> MockUserStatDatabase:
    """Mock database answering every query with ``sample_rows``."""
    return MockUserStatDatabase([rows_to_columns(sample_rows)])


@pytest.fixture
def collector(registry, mock_database) -> UserStatCollector:
    """Collector wired to the mock database."""
    return UserStatCollector(registry, mock_database)
