"""
Parallel Query Runner.

Runs a set of independent query functions concurrently and waits for
all of them. Query functions report their own errors; anything that
escapes one is logged here and does not affect the others.
"""

from __future__ import annotations

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

QueryFunc = Callable[[], None]


def collect_in_parallel(
    funcs: Sequence[QueryFunc],
    max_workers: Optional[int] = None,
) -> None:
    """
    Run every function in its own worker and block until all finish.

    Args:
        funcs: Zero-argument callables; return values are ignored
        max_workers: Worker cap (default: one per function)
    """
    if not funcs:
        return

    with ThreadPoolExecutor(
        max_workers=max_workers or len(funcs),
        thread_name_prefix="userstat-query",
    ) as executor:
        # Workers do not inherit contextvars; carry the cycle context over.
        futures = {
            executor.submit(contextvars.copy_context().run, func): func
            for func in funcs
        }
        done, _ = wait(futures)

    for future in done:
        exc = future.exception()
        if exc is not None:
            func = futures[future]
            logger.error(
                f"Query function {getattr(func, '__name__', func)!r} failed: {exc}",
                exc_info=exc,
            )
