"""
Logging Setup - structlog over stdlib logging.

Provides:
    - Structured events (JSON or console rendering) via structlog
    - Stdlib logging for module loggers, same level and stream
    - Collection cycle context merged into every event

Design Notes:
    - Output goes to stderr; stdout is reserved for metric lines
    - Context is bound with structlog.contextvars per collection cycle
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

import structlog

STDLIB_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.INFO,
    use_json: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure logging for the collector.

    Call this at application startup.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        use_json: Render structlog events as JSON lines
        stream: Destination (default: sys.stderr)

    Example:
        >>> import mysql_userstat
        >>> mysql_userstat.configure_logging("DEBUG", use_json=True)
    """
    log_level = _resolve_level(level)
    out = stream or sys.stderr

    logging.basicConfig(
        level=log_level,
        format=STDLIB_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=out,
        force=True,
    )
    logging.getLogger("mysql_userstat").setLevel(log_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=True,
    )
