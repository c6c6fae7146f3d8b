"""Domain models for the schedule board."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from schedule_board.domain.errors import (
    ConflictError,
    OrderError,
    ValidationError,
)

try:
    from enum import StrEnum
except ImportError:  # pragma: no cover - fallback for older Python runtimes

    class StrEnum(str, Enum):
        pass


class DecisionStatus(StrEnum):
    ACCEPTED = "accepted"
    MISSING_FIELDS = "missing_fields"
    END_NOT_AFTER_START = "end_not_after_start"
    CONFLICT = "conflict"


REQUIRED_FIELDS = ("owner", "start_date", "start_time", "end_date", "end_time")


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Owner(BaseModel):
    name: str
    color: str


class Schedule(BaseModel):
    id: int
    owner: str
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _end_after_start(self) -> Schedule:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()


class Decision(BaseModel):
    """Outcome of evaluating a candidate against the current schedule set."""

    status: DecisionStatus
    start: datetime | None = None
    end: datetime | None = None
    missing_fields: list[str] = Field(default_factory=list)
    earliest_allowed: datetime | None = None
    conflicting_id: int | None = None
    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status == DecisionStatus.ACCEPTED

    def raise_for_rejection(self) -> None:
        """Raise the error matching a rejected decision; no-op when accepted."""
        if self.status == DecisionStatus.MISSING_FIELDS:
            raise ValidationError(self.missing_fields)
        if self.status == DecisionStatus.END_NOT_AFTER_START:
            raise OrderError()
        if self.status == DecisionStatus.CONFLICT:
            raise ConflictError(self.earliest_allowed, self.conflicting_id, self.start)


class MonthGrid(BaseModel):
    """Calendar layout for one month: leading blanks, then day numbers."""

    year: int
    month: int = Field(ge=1, le=12)
    offset: int = Field(ge=0, le=6)
    days_in_month: int
    cells: list[int | None]

    def weeks(self) -> list[list[int | None]]:
        rows = [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]
        if rows and len(rows[-1]) < 7:
            rows[-1] = rows[-1] + [None] * (7 - len(rows[-1]))
        return rows


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class ScheduleRequest(BaseModel):
    """Raw form input; every field may be missing or blank."""

    owner: str | None = None
    start_date: str | None = None
    start_time: str | None = None
    end_date: str | None = None
    end_time: str | None = None

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]


class ScheduleView(BaseModel):
    id: int
    owner: str
    color: str | None = None
    start: datetime
    end: datetime


class MonthRef(BaseModel):
    year: int
    month: int


class CalendarCell(BaseModel):
    day: int
    schedules: list[ScheduleView] = Field(default_factory=list)


class CalendarMonth(BaseModel):
    year: int
    month: int
    title: str
    offset: int
    days_in_month: int
    cells: list[CalendarCell | None]
    previous: MonthRef
    next: MonthRef
