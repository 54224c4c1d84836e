"""
Wall-clock timing of fitting phases.

The solvers wrap each phase (coefficient computation, residuals,
randomized network fit, gradient refinement) in a Timer section; the
resulting dict becomes Result.timing or AlgebraicNetwork.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall stopwatch with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('coefficients'):
            beta = regress(estimator, X, y)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'coefficients': ...}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + time.perf_counter() - t0

    def result(self) -> dict[str, float]:
        """
        Timings in seconds: 'total_seconds' plus one key per section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
