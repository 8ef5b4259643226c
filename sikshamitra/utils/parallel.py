"""Parallel processing utilities."""

from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar


T = TypeVar("T")
R = TypeVar("R")


def map_parallel_ordered(
    func: Callable[[T], R],
    items: Iterable[T],
    max_workers: int = 4,
) -> Iterator[R]:
    """
    Map function over items on a thread pool, preserving order.

    The engine functions share only read-only tables, so threads need no
    coordination. With ``max_workers <= 1`` items are mapped in the caller's
    thread.

    Args:
        func: Function to apply
        items: Items to process
        max_workers: Maximum worker threads

    Yields:
        Results in original order
    """
    if max_workers <= 1:
        yield from map(func, items)
        return

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        yield from executor.map(func, items)
