"""
Phase timing for solvers.

gauss_jordan() reports how long it spent building the augmented matrix
and how long elimination took; Timer collects those durations into the
Result.timing dict.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named phases.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('augment'):
            work = A.extend(0, n)
        with timer.section('eliminate'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.002, 'augment': 0.0001, 'eliminate': 0.0019}

    Entering the same phase twice adds to its total.
    """

    def __init__(self) -> None:
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under the phase `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._phases[name] = self._phases.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Phase durations in seconds plus 'total_seconds'.

        Raises:
            RuntimeError: If the timer was never stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}
