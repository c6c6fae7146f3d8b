"""In-memory repository for the schedule set."""

from __future__ import annotations

import threading

from schedule_board.domain.models import Schedule


class ScheduleRepository:
    """Tuple-backed store for Schedule instances, newest start first.

    Every mutation swaps in a freshly built tuple, so a reader holding a
    snapshot never sees a half-applied change. Writers serialise on a
    re-entrant lock; hold ``locked()`` to make a read-check-write sequence
    atomic.
    """

    def __init__(self) -> None:
        self._schedules: tuple[Schedule, ...] = ()
        self._lock = threading.RLock()

    def locked(self) -> threading.RLock:
        return self._lock

    def snapshot(self) -> tuple[Schedule, ...]:
        return self._schedules

    def list_all(self) -> list[Schedule]:
        return list(self._schedules)

    def get(self, schedule_id: int) -> Schedule | None:
        for schedule in self._schedules:
            if schedule.id == schedule_id:
                return schedule
        return None

    def add(self, schedule: Schedule) -> None:
        with self._lock:
            # sorted() is stable with reverse=True, so equal starts keep insertion order
            self._schedules = tuple(
                sorted((*self._schedules, schedule), key=lambda s: s.start, reverse=True)
            )

    def delete(self, schedule_id: int) -> Schedule | None:
        """Remove the schedule with *schedule_id* and return it, or None if absent."""
        with self._lock:
            removed = self.get(schedule_id)
            if removed is not None:
                self._schedules = tuple(s for s in self._schedules if s.id != schedule_id)
            return removed

    def clear(self) -> None:
        with self._lock:
            self._schedules = ()
