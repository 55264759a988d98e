"""Parallel fan-out of independent calls."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")


def fan_out(calls: Sequence[Callable[[], T]], max_workers: int) -> list[T]:
    """
    Run independent calls on a bounded thread pool.

    Every call runs to completion. Results come back in submission order; if
    any call failed, the first failure in submission order is re-raised after
    the pool drains.
    """
    if not calls:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(calls)))) as executor:
        futures = [executor.submit(call) for call in calls]
    return [future.result() for future in futures]
