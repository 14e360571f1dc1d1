"""
Unit Tests for the Graphite formatter.

Test Aspects Covered:
    ✅ Business Logic: Line format, per-user ordering
    ✅ Error Handling: Failing and short writes
    ✅ Edge Cases: Dotted usernames, empty store
"""

from __future__ import annotations

import io

import pytest

from mysql_userstat.errors import WriteError
from mysql_userstat.formatting.graphite import format_graphite, render_lines
from mysql_userstat.store.metric_store import MetricStore


def _store(**users) -> MetricStore:
    store = MetricStore()
    for name, (total, concurrent, connected) in users.items():
        metrics = store.ensure(name)
        metrics.total_connections.set(total)
        metrics.concurrent_connections.set(concurrent)
        metrics.connected_time.set(connected)
    return store


class FailingSink:
    """Accepts ``limit`` writes, then raises."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.chunks: list = []

    def write(self, data: bytes) -> int:
        if len(self.chunks) >= self.limit:
            raise BrokenPipeError("pipe closed")
        self.chunks.append(data)
        return len(data)


class TestRenderLines:
    """Test cases for render_lines."""

    def test_three_lines_per_user_in_fixed_order(self) -> None:
        store = _store(alice=(10, 2, 345))

        assert render_lines(store) == [
            "alice.TotalConnections 10.00000",
            "alice.ConcurrentConnections 2.00000",
            "alice.ConnectedTime 345.00000",
        ]

    def test_empty_store(self) -> None:
        assert render_lines(MetricStore()) == []

    def test_new_user_renders_zeros(self) -> None:
        store = MetricStore()
        store.ensure("carol")
        assert render_lines(store)[0] == "carol.TotalConnections 0.00000"

    def test_five_decimal_places(self) -> None:
        store = _store(alice=(0.123456, 1e6, -3))

        assert render_lines(store) == [
            "alice.TotalConnections 0.12346",
            "alice.ConcurrentConnections 1000000.00000",
            "alice.ConnectedTime -3.00000",
        ]

    def test_dotted_username_is_not_escaped(self) -> None:
        store = _store(**{"app.reader": (1, 0, 0)})
        assert render_lines(store)[0] == "app.reader.TotalConnections 1.00000"


class TestFormatGraphite:
    """Test cases for format_graphite."""

    def test_writes_newline_terminated_bytes(self) -> None:
        sink = io.BytesIO()

        format_graphite(_store(alice=(10, 2, 345)), sink)

        assert sink.getvalue() == (
            b"alice.TotalConnections 10.00000\n"
            b"alice.ConcurrentConnections 2.00000\n"
            b"alice.ConnectedTime 345.00000\n"
        )

    def test_one_write_per_line(self) -> None:
        sink = FailingSink(limit=100)
        format_graphite(_store(alice=(1, 1, 1), bob=(2, 2, 2)), sink)
        assert len(sink.chunks) == 6

    def test_idempotent_on_unchanged_store(self) -> None:
        store = _store(alice=(1, 2, 3), bob=(4, 5, 6))
        first, second = io.BytesIO(), io.BytesIO()

        format_graphite(store, first)
        format_graphite(store, second)

        assert first.getvalue() == second.getvalue()

    def test_write_failure_stops_and_keeps_written_lines(self) -> None:
        sink = FailingSink(limit=2)

        with pytest.raises(WriteError) as exc_info:
            format_graphite(_store(alice=(1, 2, 3)), sink)

        assert exc_info.value.lines_written == 2
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)
        assert sink.chunks == [
            b"alice.TotalConnections 1.00000\n",
            b"alice.ConcurrentConnections 2.00000\n",
        ]

    def test_closed_stream_raises_write_error(self) -> None:
        sink = io.BytesIO()
        sink.close()

        with pytest.raises(WriteError):
            format_graphite(_store(alice=(1, 2, 3)), sink)

    def test_short_write_raises(self) -> None:
        class ShortSink:
            def write(self, data: bytes) -> int:
                return len(data) - 1

        with pytest.raises(WriteError) as exc_info:
            format_graphite(_store(alice=(1, 2, 3)), ShortSink())

        assert exc_info.value.lines_written == 0
