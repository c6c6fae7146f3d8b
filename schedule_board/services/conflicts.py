"""Service for deciding whether a candidate schedule may be admitted."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime

from schedule_board.domain.errors import ConflictError, OrderError, ValidationError
from schedule_board.domain.models import Decision, DecisionStatus, Schedule, ScheduleRequest

logger = logging.getLogger(__name__)

_INSTANT_FORMAT = "%Y-%m-%d %H:%M"
_WITH_SECONDS = re.compile(r"\d{2}:\d{2}:\d{2}")


def combine_instant(date_str: str, time_str: str) -> datetime:
    """Combine a ``YYYY-MM-DD`` date and an ``HH:MM`` time into one instant.

    Seconds from an ``HH:MM:SS`` time are dropped. Raises ``ValueError`` for
    strings in any other shape.
    """
    time_str = time_str.strip()
    if _WITH_SECONDS.fullmatch(time_str):
        time_str = time_str[:5]
    return datetime.strptime(f"{date_str.strip()} {time_str}", _INSTANT_FORMAT)


def is_same_day(start: datetime, end: datetime, existing: Schedule) -> bool:
    """Loose same-day check on boundary dates only.

    True when the candidate starts on the day *existing* ends, or ends on the
    day *existing* starts. Interior days of multi-day spans are not compared.
    """
    return start.date() == existing.end_date or end.date() == existing.start_date


def find_first_conflict(
    start: datetime,
    end: datetime,
    existing: Sequence[Schedule],
) -> Schedule | None:
    """Return the first schedule, in storage order, the candidate collides with.

    The scan stops at the first hit; it does not look for the latest-ending
    conflict.
    """
    for schedule in existing:
        if is_same_day(start, end, schedule) and start < schedule.end:
            logger.debug("Candidate %s-%s collides with schedule %s", start, end, schedule.id)
            return schedule
    return None


def evaluate(existing: Sequence[Schedule], candidate: ScheduleRequest) -> Decision:
    """Decide whether *candidate* may join *existing*.

    Checks run in order: required fields, end strictly after start, then the
    same-day overlap scan. Neither argument is modified.
    """
    missing = candidate.missing_fields()
    if missing:
        return Decision(
            status=DecisionStatus.MISSING_FIELDS,
            missing_fields=missing,
            message=ValidationError(missing).message,
        )

    start = combine_instant(candidate.start_date, candidate.start_time)
    end = combine_instant(candidate.end_date, candidate.end_time)

    if end <= start:
        return Decision(
            status=DecisionStatus.END_NOT_AFTER_START,
            start=start,
            end=end,
            message=OrderError().message,
        )

    conflict = find_first_conflict(start, end, existing)
    if conflict is not None:
        return Decision(
            status=DecisionStatus.CONFLICT,
            start=start,
            end=end,
            earliest_allowed=conflict.end,
            conflicting_id=conflict.id,
            message=ConflictError(conflict.end, conflict.id, start).message,
        )

    return Decision(status=DecisionStatus.ACCEPTED, start=start, end=end)
