"""Processor counts, thread identifiers and a minimal thread wrapper."""

from __future__ import annotations

import argparse
import functools
import os
import sys
import threading
import time
from collections.abc import Callable, Sequence
from typing import Any, Optional

PAGE_SIZE = 4096

_UINT_MASK = 0xFFFFFFFF


@functools.lru_cache(maxsize=None)
def num_processors() -> int:
    """Number of online processors, computed once.

    Falls back to two when the count is unavailable, so that callers never
    assume a uniprocessor.
    """
    count = os.cpu_count()
    return count if count else 2


def thread_id() -> int:
    """A small unsigned identifier for the calling thread."""
    ident = threading.get_ident()
    if sys.platform == "win32":
        return (ident >> 2) & _UINT_MASK
    if sys.platform.startswith("linux"):
        return (ident & _UINT_MASK) >> 12
    return (ident >> 12) & _UINT_MASK


class Fred:
    """A thread wrapper of childlike simplicity."""

    concurrency = 0

    def __init__(self) -> None:
        self._thread: Optional[threading.Thread] = None
        self._result: Any = None

    def create(self, function: Callable[[Any], Any], arg: Any) -> None:
        """Start running ``function(arg)`` in a new thread."""

        def run() -> None:
            self._result = function(arg)

        self._result = None
        self._thread = threading.Thread(target=run)
        self._thread.start()

    def join(self) -> Any:
        """Wait for the thread to finish and return what the function returned."""
        if self._thread is None:
            raise RuntimeError("thread was never created")
        self._thread.join()
        return self._result

    @staticmethod
    def yield_now() -> None:
        """Give up the processor to another thread."""
        if hasattr(os, "sched_yield"):
            os.sched_yield()
        else:
            time.sleep(0)

    @staticmethod
    def set_concurrency(n: int) -> None:
        """Record the desired level of concurrency (a scheduling hint)."""
        if n < 0:
            raise ValueError("concurrency must be non-negative")
        Fred.concurrency = n


def distribution_check(num_threads: int = 256) -> int:
    """Run ``num_threads`` threads and return the largest bucket count.

    Each thread increments ``counter[thread_id() % num_threads]``; the result
    should be near 1 if thread ids are spread evenly.
    """
    if num_threads <= 0:
        raise ValueError("number of threads must be positive")
    counter = [0] * num_threads
    lock = threading.Lock()

    def record(_: Any) -> None:
        with lock:
            counter[thread_id() % num_threads] += 1

    workers = [Fred() for _ in range(num_threads)]
    for worker in workers:
        worker.create(record, None)
    for worker in workers:
        worker.join()
    return max(counter)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check the spread of thread ids.")
    parser.add_argument("--threads", type=int, default=256, help="number of threads")
    args = parser.parse_args(argv)
    print(f"Maximum entries (should be near 1): {distribution_check(args.threads)}")
    return 0