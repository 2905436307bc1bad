"""A simple stopwatch based on a monotonic clock."""

from __future__ import annotations

import time


class Clock:
    """Measures seconds elapsed since the last mark."""

    __slots__ = ("_mark",)

    def __init__(self) -> None:
        self._mark = time.monotonic()

    def peek(self) -> float:
        """Return the seconds since the last mark without resetting it."""
        return time.monotonic() - self._mark

    def mark(self) -> float:
        """Reset the mark and return the seconds that elapsed since the previous one."""
        last = self._mark
        self._mark = time.monotonic()
        return self._mark - last