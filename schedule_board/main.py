"""FastAPI application: entry point for the schedule board."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Path

from schedule_board.config import LOG_LEVEL, OWNERS, is_known_owner, owner_color
from schedule_board.domain.errors import (
    ConflictError,
    ScheduleRejected,
    UnknownOwnerError,
)
from schedule_board.domain.models import (
    CalendarMonth,
    MonthRef,
    Owner,
    Schedule,
    ScheduleRequest,
    ScheduleView,
)
from schedule_board.logging_config import setup_logging
from schedule_board.repos.memory import ScheduleRepository
from schedule_board.services.admission import admit
from schedule_board.services.calendar import (
    month_grid,
    month_title,
    project_month,
    shift_month,
)
from schedule_board.services.ids import IdAllocator

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Schedule Board")

# ── Singletons (created at import time for simplicity) ────────────────
schedule_repo = ScheduleRepository()
id_allocator = IdAllocator()


def _to_view(schedule: Schedule) -> ScheduleView:
    return ScheduleView(
        id=schedule.id,
        owner=schedule.owner,
        color=owner_color(schedule.owner),
        start=schedule.start,
        end=schedule.end,
    )


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/owners", response_model=list[Owner])
def list_owners() -> list[Owner]:
    """Return the fixed owner table."""
    return list(OWNERS)


@app.post("/schedules", response_model=ScheduleView, status_code=201)
def create_schedule(payload: ScheduleRequest) -> ScheduleView:
    """Admit a schedule from raw form input, or explain why it was rejected."""
    try:
        # Missing fields are reported ahead of an unknown owner
        if not payload.missing_fields() and not is_known_owner(payload.owner):
            raise UnknownOwnerError(payload.owner)
        schedule = admit(schedule_repo, payload, id_allocator)
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=exc.to_detail())
    except ScheduleRejected as exc:
        raise HTTPException(status_code=422, detail=exc.to_detail())
    except ValueError as exc:
        # Date/time strings the pickers should never have produced
        logger.warning("Unparsable date/time in schedule request: %s", exc)
        raise HTTPException(
            status_code=422,
            detail={"reason": "invalid_datetime", "message": str(exc)},
        )
    return _to_view(schedule)


@app.get("/schedules", response_model=list[ScheduleView])
def list_schedules() -> list[ScheduleView]:
    """Return all schedules, latest start first."""
    return [_to_view(s) for s in schedule_repo.list_all()]


@app.delete("/schedules/{schedule_id}", status_code=200)
def delete_schedule(schedule_id: int) -> dict:
    """Delete a schedule by id."""
    removed = schedule_repo.delete(schedule_id)
    if removed is None:
        raise HTTPException(status_code=404, detail="Schedule not found")
    logger.info("Deleted schedule %s for %s", schedule_id, removed.owner)
    return {"status": "deleted", "id": schedule_id}


@app.get("/calendar/{year}/{month}", response_model=CalendarMonth)
def get_calendar_month(
    year: int = Path(ge=2, le=9998),
    month: int = Path(ge=1, le=12),
) -> CalendarMonth:
    """Return the month grid with each day's occupants and the adjacent months.

    ``previous``/``next`` are the one-month navigation targets; the viewed
    month itself is client state.
    """
    grid = month_grid(year, month)
    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    return CalendarMonth(
        year=year,
        month=month,
        title=month_title(year, month),
        offset=grid.offset,
        days_in_month=grid.days_in_month,
        cells=project_month(schedule_repo.snapshot(), year, month, owner_color),
        previous=MonthRef(year=prev_year, month=prev_month),
        next=MonthRef(year=next_year, month=next_month),
    )
