"""A simple high-resolution timer."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Optional


class Timer:
    """Measures the time between :meth:`start` and :meth:`stop`.

    Each :meth:`stop` records the time since the most recent :meth:`start`.
    The timer can also be used as a context manager.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start: Optional[float] = None
        self._elapsed = 0.0

    def start(self) -> None:
        self._start = self._clock()

    def stop(self) -> None:
        if self._start is None:
            raise RuntimeError("timer stopped before it was started")
        self._elapsed = self._clock() - self._start

    def elapsed(self) -> float:
        """Seconds measured by the last :meth:`stop`, or 0.0 if none."""
        return self._elapsed

    def __float__(self) -> float:
        return self._elapsed

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @staticmethod
    def current_time() -> float:
        """The current wall-clock time in seconds."""
        return time.time()