"""
Thread-pool fan-out for order-insensitive per-element work.

Set algebra is associative and commutative and elements carry no shared
mutable state, so mapping over the elements of a set can be split across
workers without changing the result.
"""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import constants

logger = logging.getLogger(__name__)

E = TypeVar("E")
R = TypeVar("R")


def parallel_map(
    f: Callable[[E], R],
    items: Iterable[E],
    max_workers: int | None = None,
) -> list[R]:
    """
    Applies f to every item on a thread pool.

    Args:
        f: Function applied to each item. Must not mutate shared state.
        items: Items to map over.
        max_workers: Pool size, defaults to constants.PARALLEL_WORKERS.

    Returns:
        The results, in the iteration order of items.
    """
    workers = max_workers or constants.PARALLEL_WORKERS
    items = list(items)
    logger.debug(f"Mapping over {len(items)} items with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(f, items))


__all__ = ["parallel_map"]
