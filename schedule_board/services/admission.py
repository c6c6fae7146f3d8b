"""Service for admitting new schedules into the repository."""

from __future__ import annotations

import logging

from schedule_board.domain.errors import ScheduleRejected
from schedule_board.domain.models import Schedule, ScheduleRequest
from schedule_board.repos.memory import ScheduleRepository
from schedule_board.services.conflicts import evaluate
from schedule_board.services.ids import IdAllocator

logger = logging.getLogger(__name__)


def admit(
    repo: ScheduleRepository,
    request: ScheduleRequest,
    ids: IdAllocator,
) -> Schedule:
    """Evaluate *request* against the stored schedules and store it if accepted.

    Raises a ``ScheduleRejected`` subclass when the request is rejected; the
    repository is left untouched in that case.
    """
    # Check and insert must see the same set
    with repo.locked():
        decision = evaluate(repo.snapshot(), request)
        try:
            decision.raise_for_rejection()
        except ScheduleRejected as exc:
            logger.info("Rejected schedule for %s: %s", request.owner, exc.reason)
            raise

        schedule = Schedule(
            id=ids.next_id(),
            owner=request.owner,
            start=decision.start,
            end=decision.end,
        )
        repo.add(schedule)
    logger.info(
        "Admitted schedule %s for %s (%s -> %s)",
        schedule.id,
        schedule.owner,
        schedule.start,
        schedule.end,
    )
    return schedule
