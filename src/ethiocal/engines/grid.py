"""
ethiocal.engines.grid
---------------------
Month grids for rendering: leading blanks so that day 1 sits under its
weekday in a Sunday-first, 7-column layout, followed by one cell per day.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.time import weekday_of_jdn
from ..core.types import MonthGridCell
from ..presentation.holidays import is_holiday
from .conversion import ethiopian_to_gregorian, new_year_jdn
from .validator import MONTHS_PER_YEAR, days_in_month, validate

Grid = List[Optional[MonthGridCell]]


def first_weekday_offset(year: int, month: int) -> int:
    """Number of blank cells before day 1 (its weekday, 0=Sunday)."""
    validate(year, month, 1)
    return weekday_of_jdn(new_year_jdn(year) + 30 * (month - 1))


def month_grid(year: int, month: int) -> Grid:
    pad = first_weekday_offset(year, month)
    n_days = days_in_month(month, year)

    cells: Grid = [None] * pad
    for day in range(1, n_days + 1):
        g = ethiopian_to_gregorian(year, month, day)
        holiday = is_holiday(month, day)
        cells.append(MonthGridCell(
            day=day,
            weekday=(pad + day - 1) % 7,
            gregorian=g,
            is_holiday=holiday is not None,
            holiday=holiday,
        ))
    return cells


def month_weeks(year: int, month: int) -> List[Grid]:
    """The month grid cut into rows of 7; the last row is padded with None."""
    cells = month_grid(year, month)
    weeks: List[Grid] = []
    for i in range(0, len(cells), 7):
        wk = cells[i:i + 7]
        while len(wk) < 7:
            wk.append(None)
        weeks.append(wk)
    return weeks


def previous_month(year: int, month: int) -> Tuple[int, int]:
    validate(year, month, 1)
    if month == 1:
        validate(year - 1, MONTHS_PER_YEAR, 1)
        return year - 1, MONTHS_PER_YEAR
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    validate(year, month, 1)
    if month == MONTHS_PER_YEAR:
        return year + 1, 1
    return year, month + 1
