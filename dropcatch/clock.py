"""Frame timer."""

import time
from collections.abc import Callable


class Clock:
    """Reports the time passed since the previous call to ``elapsed``."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter) -> None:
        self._time_source = time_source
        self._start = 0.0

    def elapsed(self) -> float:
        """Return seconds since the last call and restart the measurement."""
        current = float(self._time_source())
        passed = current - self._start
        self._start = current
        return passed