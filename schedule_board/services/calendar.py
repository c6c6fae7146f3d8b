"""Service for projecting schedules onto a monthly calendar grid."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from schedule_board.domain.models import CalendarCell, MonthGrid, Schedule, ScheduleView


def occupants_of(
    existing: Sequence[Schedule], year: int, month: int, day: int
) -> list[Schedule]:
    """Return the schedules occupying the given day, in the set's own order.

    A schedule occupies every calendar date from its start date to its end
    date, both inclusive; time of day is ignored. Raises ``ValueError`` for
    an impossible date.
    """
    target = date(year, month, day)
    return [s for s in existing if s.start_date <= target <= s.end_date]


def month_grid(year: int, month: int) -> MonthGrid:
    """Lay out *month* as leading blank cells followed by day numbers.

    ``offset`` counts from Sunday. No trailing blanks are added to ``cells``;
    use ``MonthGrid.weeks()`` for full rows.
    """
    first = date(year, month, 1)
    # Day 0 of the following month is the last day of this one.
    last = first + relativedelta(months=1) - timedelta(days=1)
    offset = (first.weekday() + 1) % 7
    cells: list[int | None] = [None] * offset
    cells.extend(range(1, last.day + 1))
    return MonthGrid(
        year=year,
        month=month,
        offset=offset,
        days_in_month=last.day,
        cells=cells,
    )


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move *delta* months from (year, month), rolling over year boundaries."""
    shifted = date(year, month, 1) + relativedelta(months=delta)
    return shifted.year, shifted.month


def month_title(year: int, month: int) -> str:
    return date(year, month, 1).strftime("%B %Y")


def project_month(
    existing: Sequence[Schedule],
    year: int,
    month: int,
    color_for: Callable[[str], str | None] = lambda _owner: None,
) -> list[CalendarCell | None]:
    """Build one cell per grid slot with that day's occupants; blanks stay None."""
    grid = month_grid(year, month)
    cells: list[CalendarCell | None] = []
    for day in grid.cells:
        if day is None:
            cells.append(None)
            continue
        cells.append(
            CalendarCell(
                day=day,
                schedules=[
                    ScheduleView(
                        id=s.id,
                        owner=s.owner,
                        color=color_for(s.owner),
                        start=s.start,
                        end=s.end,
                    )
                    for s in occupants_of(existing, year, month, day)
                ],
            )
        )
    return cells
