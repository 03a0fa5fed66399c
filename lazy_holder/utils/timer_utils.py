"""Timing utilities.

Used by the holder to report how long construction took.
"""

import time
from typing import Optional


def elapsed_ms(start_time: float) -> float:
    """
    Calculate elapsed time in milliseconds since start_time.

    Args:
        start_time: Start time from time.perf_counter()

    Returns:
        Elapsed time in milliseconds
    """
    return (time.perf_counter() - start_time) * 1000


class Timer:
    """
    Context manager for timing code blocks.

    Usage:
        >>> with Timer() as t:
        ...     build_something()
        >>> print(f"Elapsed: {t.elapsed_ms:.2f}ms")

    The elapsed time is frozen when the block exits, even if it raised.
    """

    def __init__(self):
        self.start_time: Optional[float] = None
        self._stopped_ms: Optional[float] = None

    @property
    def elapsed_ms(self) -> float:
        """Elapsed milliseconds; live while running, final once stopped."""
        if self._stopped_ms is not None:
            return self._stopped_ms
        if self.start_time is None:
            return 0.0
        return elapsed_ms(self.start_time)

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        self._stopped_ms = None
        return self

    def __exit__(self, *args) -> None:
        self._stopped_ms = elapsed_ms(self.start_time)

    def __repr__(self) -> str:
        return f"Timer(elapsed_ms={self.elapsed_ms:.2f})"
