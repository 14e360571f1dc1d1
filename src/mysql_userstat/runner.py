"""
Collection Loop.

Calls collect() on a fixed interval and writes the rendered metrics to
a sink after every cycle. Used by ``python -m mysql_userstat``.

How to run:
    python -m mysql_userstat --config userstat.yaml
    python -m mysql_userstat --config userstat.yaml --once
    MYSQL_USERSTAT_PASSWORD=secret python -m mysql_userstat --config userstat.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import IO, Callable, List, Optional

import yaml
from pydantic import ValidationError

from mysql_userstat.adapters.metrics_registry import InMemoryMetricsRegistry
from mysql_userstat.collector.userstat import UserStatCollector
from mysql_userstat.config.loader import ConfigLoader
from mysql_userstat.config.models import UserStatConfig
from mysql_userstat.errors import DatabaseConnectionError, WriteError
from mysql_userstat.observability.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _flush(sink: IO[bytes]) -> None:
    flush = getattr(sink, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except Exception as exc:
        raise WriteError(f"flush failed: {exc}") from exc


def run(
    collector: UserStatCollector,
    sink: IO[bytes],
    interval_seconds: float,
    iterations: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Collect and render until ``iterations`` cycles are done (forever if None).

    Returns:
        Number of completed cycles

    Raises:
        WriteError: If the sink rejects a write
    """
    completed = 0
    while iterations is None or completed < iterations:
        started = time.monotonic()
        collector.collect()
        try:
            collector.format_graphite(sink)
            _flush(sink)
        except WriteError as exc:
            logger.error(f"Writing metrics failed: {exc}")
            raise
        completed += 1
        logger.debug(
            f"Cycle {completed} done in {time.monotonic() - started:.3f}s "
            f"({len(collector.store)} users)"
        )

        if iterations is not None and completed >= iterations:
            break
        sleep(interval_seconds)
    return completed


def build_collector(config: UserStatConfig) -> UserStatCollector:
    """
    Connect with the configured database settings.

    Raises:
        DatabaseConnectionError: If the connection cannot be established
    """
    db = config.database
    return UserStatCollector.from_credentials(
        InMemoryMetricsRegistry(),
        user=db.user,
        password=db.password,
        host=db.host,
        config=db.option_file,
        prefix=config.collector.metric_prefix,
        port=db.port,
        max_connections=db.max_connections,
        connect_timeout=db.connect_timeout,
    )


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mysql_userstat",
        description="Publish MySQL USER_STATISTICS as Graphite lines",
    )
    parser.add_argument("--config", required=True, type=Path, help="YAML config file")
    parser.add_argument("--profile", default=None, help="profile to merge over the config")
    parser.add_argument("--once", action="store_true", help="collect once and exit")
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    sink: Optional[IO[bytes]] = None,
) -> int:
    """Command line entry point; returns the process exit code."""
    args = _parse_args(argv)
    try:
        config = ConfigLoader(base_path=args.config.parent).load(args.config.name, args.profile)
        configure_logging(config.logging.level, use_json=config.logging.use_json)
    except (OSError, yaml.YAMLError, ValidationError, ValueError) as exc:
        logger.error(f"Invalid configuration {str(args.config)!r}: {exc}")
        return 1

    try:
        collector = build_collector(config)
    except DatabaseConnectionError as exc:
        logger.error(f"Cannot start collector: {exc}")
        return 1

    try:
        run(
            collector,
            sink or sys.stdout.buffer,
            config.collector.interval_seconds,
            iterations=1 if args.once else None,
        )
    except WriteError:
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
    finally:
        collector.close()
    return 0
