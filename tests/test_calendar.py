"""Tests for the calendar projection service."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from schedule_board.domain.models import Schedule
from schedule_board.services.calendar import (
    month_grid,
    month_title,
    occupants_of,
    project_month,
    shift_month,
)


def _make_schedule(start: datetime, end: datetime, schedule_id: int) -> Schedule:
    return Schedule(id=schedule_id, owner="Mike Johnson", start=start, end=end)


# ---------------------------------------------------------------------------
# occupants_of
# ---------------------------------------------------------------------------


def test_occupies_every_day_from_start_to_end_inclusive():
    schedule = _make_schedule(
        datetime(2024, 3, 30, 22, 0), datetime(2024, 4, 2, 1, 0), schedule_id=1
    )
    occupied = {date(2024, 3, 30), date(2024, 3, 31), date(2024, 4, 1), date(2024, 4, 2)}

    day = date(2024, 3, 25)
    while day <= date(2024, 4, 8):
        result = occupants_of([schedule], day.year, day.month, day.day)
        if day in occupied:
            assert result == [schedule], day
        else:
            assert result == [], day
        day += timedelta(days=1)


def test_time_of_day_is_ignored():
    """A late-night schedule still occupies its start date."""
    schedule = _make_schedule(
        datetime(2024, 3, 1, 23, 0), datetime(2024, 3, 1, 23, 30), schedule_id=1
    )
    assert occupants_of([schedule], 2024, 3, 1) == [schedule]


def test_occupants_keep_set_order():
    later = _make_schedule(
        datetime(2024, 3, 1, 14, 0), datetime(2024, 3, 1, 15, 0), schedule_id=1
    )
    earlier = _make_schedule(
        datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 1, 10, 0), schedule_id=2
    )
    assert occupants_of([later, earlier], 2024, 3, 1) == [later, earlier]


def test_occupants_of_invalid_day_raises():
    with pytest.raises(ValueError):
        occupants_of([], 2023, 2, 29)


# ---------------------------------------------------------------------------
# month_grid
# ---------------------------------------------------------------------------


def test_leap_february_has_29_days():
    grid = month_grid(2024, 2)
    assert grid.days_in_month == 29
    # 2024-02-01 was a Thursday
    assert grid.offset == 4


def test_common_february_has_28_days():
    grid = month_grid(2023, 2)
    assert grid.days_in_month == 28
    assert grid.offset == 3


def test_century_rule():
    assert month_grid(1900, 2).days_in_month == 28
    assert month_grid(2000, 2).days_in_month == 29


def test_cells_are_leading_blanks_then_days():
    grid = month_grid(2024, 3)
    # 2024-03-01 was a Friday
    assert grid.offset == 5
    assert grid.cells[:5] == [None] * 5
    assert grid.cells[5:] == list(range(1, 32))
    assert len(grid.cells) == 36


def test_month_starting_on_sunday_has_no_blanks():
    grid = month_grid(2026, 2)
    assert grid.offset == 0
    assert grid.cells == list(range(1, 29))
    assert len(grid.weeks()) == 4


def test_weeks_pad_the_last_row():
    weeks = month_grid(2024, 3).weeks()
    assert len(weeks) == 6
    assert all(len(week) == 7 for week in weeks)
    assert weeks[-1] == [31, None, None, None, None, None, None]


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def test_shift_month_forward_rolls_year():
    assert shift_month(2024, 12, 1) == (2025, 1)


def test_shift_month_backward_rolls_year():
    assert shift_month(2024, 1, -1) == (2023, 12)


def test_shift_month_within_year():
    assert shift_month(2024, 5, 1) == (2024, 6)
    assert shift_month(2024, 5, -1) == (2024, 4)


def test_month_title():
    assert month_title(2024, 3) == "March 2024"


# ---------------------------------------------------------------------------
# project_month
# ---------------------------------------------------------------------------


def test_project_month_fills_day_cells():
    schedule = _make_schedule(
        datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 5, 10, 0), schedule_id=7
    )
    cells = project_month([schedule], 2024, 3, lambda owner: "#BAE1FF")

    assert cells[:5] == [None] * 5
    by_day = {cell.day: cell for cell in cells if cell is not None}
    assert len(by_day) == 31
    assert [s.id for s in by_day[4].schedules] == [7]
    assert [s.id for s in by_day[5].schedules] == [7]
    assert by_day[4].schedules[0].color == "#BAE1FF"
    assert by_day[6].schedules == []
