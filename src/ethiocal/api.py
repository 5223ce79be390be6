"""Flat query and conversion surface used by picker widgets and the CLI."""
from __future__ import annotations

from .engines.conversion import (
    add_days,
    days_between,
    ethiopian_to_gregorian,
    gregorian_to_ethiopian,
    new_year_date,
    new_year_offset,
    today,
)
from .engines.grid import (
    first_weekday_offset,
    month_grid,
    month_weeks,
    next_month,
    previous_month,
)
from .engines.validator import (
    days_in_month,
    days_in_year,
    is_ethiopian_leap,
    is_valid,
    validate,
)
from .presentation.formatting import format_date, format_numeric, parse_date
from .presentation.holidays import HOLIDAYS, holidays_in_month, is_holiday
from .presentation.names import (
    day_name,
    day_names,
    month_name,
    month_names,
    short_day_name,
)
from .core.time import is_gregorian_leap

__all__ = [
    "today",
    "gregorian_to_ethiopian",
    "ethiopian_to_gregorian",
    "add_days",
    "days_between",
    "new_year_date",
    "new_year_offset",
    "validate",
    "is_valid",
    "is_ethiopian_leap",
    "is_gregorian_leap",
    "days_in_month",
    "days_in_year",
    "month_grid",
    "month_weeks",
    "first_weekday_offset",
    "previous_month",
    "next_month",
    "month_name",
    "month_names",
    "day_name",
    "day_names",
    "short_day_name",
    "is_holiday",
    "holidays_in_month",
    "HOLIDAYS",
    "format_date",
    "format_numeric",
    "parse_date",
]
