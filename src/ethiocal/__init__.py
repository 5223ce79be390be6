"""ethiocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    today,
    gregorian_to_ethiopian,
    ethiopian_to_gregorian,
    add_days,
    days_between,
    new_year_date,
    new_year_offset,
    validate,
    is_valid,
    is_ethiopian_leap,
    is_gregorian_leap,
    days_in_month,
    days_in_year,
    month_grid,
    month_weeks,
    first_weekday_offset,
    previous_month,
    next_month,
    month_name,
    month_names,
    day_name,
    day_names,
    short_day_name,
    is_holiday,
    holidays_in_month,
    HOLIDAYS,
    format_date,
    format_numeric,
    parse_date,
)
from .core.errors import (
    EthiopianCalendarError,
    InvalidInput,
    ValidationError,
    OutOfRange,
    InvalidYear,
    InvalidMonth,
    InvalidDay,
    InvalidIndex,
)
from .core.types import EthiopianDate, HolidayEntry, MonthGridCell, LOCALES
from .picker import PickerOptions

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
    "EthiopianDate",
    "HolidayEntry",
    "MonthGridCell",
    "LOCALES",
    "PickerOptions",
    "EthiopianCalendarError",
    "InvalidInput",
    "ValidationError",
    "OutOfRange",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "InvalidIndex",
]
