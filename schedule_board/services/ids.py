"""Service for allocating schedule ids."""

from __future__ import annotations

import threading
import time
from typing import Callable


def wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class IdAllocator:
    """Hands out strictly increasing integer ids seeded from a millisecond clock.

    When two ids are requested within the same tick (or the clock steps
    backwards) the previous id plus one is used instead.
    """

    def __init__(self, clock: Callable[[], int] = wall_clock_ms) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = self._clock()
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate
