"""
Graphite Plaintext Formatter.

Renders the metric store as one ``<username>.<MetricName> <value>`` line
per gauge, three lines per user in MetricKind order. Values are printed
in fixed-point notation with five decimals. Usernames are written
verbatim; a "." inside a username is not escaped.
"""

from __future__ import annotations

from typing import IO, List

from mysql_userstat.domain.entities import MetricKind
from mysql_userstat.errors import WriteError
from mysql_userstat.store.metric_store import MetricStore

VALUE_FORMAT = "{:.5f}"


def render_lines(store: MetricStore) -> List[str]:
    """Render the current store contents without the trailing newlines."""
    lines: List[str] = []
    for username, metrics in store.snapshot():
        for kind in MetricKind:
            value = metrics.gauge(kind).get()
            lines.append(f"{username}.{kind.metric_name} {VALUE_FORMAT.format(value)}")
    return lines


def format_graphite(store: MetricStore, sink: IO[bytes]) -> None:
    """
    Write the store to ``sink`` one line at a time.

    Lines already written stay written when a later write fails.

    Args:
        store: Metric store to render
        sink: Writable binary stream

    Raises:
        WriteError: On the first write the sink rejects
    """
    written = 0
    for line in render_lines(store):
        data = (line + "\n").encode("utf-8")
        try:
            count = sink.write(data)
        except Exception as exc:
            raise WriteError(
                f"write failed after {written} lines: {exc}", lines_written=written
            ) from exc
        if count is not None and count != len(data):
            raise WriteError(
                f"short write after {written} lines ({count}/{len(data)} bytes)",
                lines_written=written,
            )
        written += 1
