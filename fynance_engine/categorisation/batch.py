"""
Order-preserving batch execution for categorization.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_preserving_order(
    func: Callable[[T], R],
    items: Sequence[T],
    max_workers: int = 1
) -> List[R]:
    """
    Apply ``func`` to every item, optionally on a thread pool.

    Results are placed by input position, not completion order, and all
    workers are joined before returning.

    Args:
        func: Callable applied to each item; must not raise
        items: Input items
        max_workers: Worker threads; 1 or less runs inline

    Returns:
        List of results, results[i] == func(items[i])
    """
    if max_workers <= 1 or len(items) <= 1:
        return [func(item) for item in items]

    results: List[R] = [None] * len(items)  # type: ignore[list-item]
    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as executor:
        futures = {
            executor.submit(func, item): idx
            for idx, item in enumerate(items)
        }
        for future, idx in futures.items():
            results[idx] = future.result()

    return results
