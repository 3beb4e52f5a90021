"""Dispatch a set of independent tasks and join on all of them."""

from collections.abc import Callable, Hashable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def fan_out(tasks: Mapping[K, Callable[[], V]], *, name: str = "fanout") -> dict[K, V]:
    """
    Run every task concurrently and return their results keyed like the input.

    Each task gets its own worker thread, so the wall time is bounded by the
    slowest task rather than the sum. The call returns only after every task
    has finished; results are merged here, on the calling thread, after the
    join. Exceptions raised by a task propagate to the caller.

    Args:
        tasks: Mapping of key to zero-argument callable.
        name: Thread name prefix for the worker threads.

    Returns:
        Dict of key to the value its task returned.
    """
    if not tasks:
        return {}

    with ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix=name) as pool:
        futures = {key: pool.submit(task) for key, task in tasks.items()}
    # Leaving the with-block waited on every future.
    return {key: future.result() for key, future in futures.items()}
