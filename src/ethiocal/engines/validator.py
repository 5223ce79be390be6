"""
ethiocal.engines.validator
--------------------------
Range checks for Ethiopian (year, month, day) triples. Twelve months of
30 days are followed by Pagume, which has 6 days in a leap year and 5
otherwise.
"""

from __future__ import annotations

from typing import Any

from ..core.errors import InvalidDay, InvalidMonth, InvalidYear, ValidationError

MONTHS_PER_YEAR = 13
DAYS_PER_MONTH = 30


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def is_ethiopian_leap(year: int) -> bool:
    return year % 4 == 3


def days_in_month(month: int, year: int) -> int:
    if not _is_int(month) or not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidMonth(f"Invalid Ethiopian month: {month!r}. Must be between 1 and 13.", year, month)
    if month == MONTHS_PER_YEAR:
        return 6 if is_ethiopian_leap(year) else 5
    return DAYS_PER_MONTH


def days_in_year(year: int) -> int:
    return 366 if is_ethiopian_leap(year) else 365


def validate(year: int, month: int, day: int) -> None:
    """Raise the first ValidationError that applies, in year, month, day order."""
    if not _is_int(year) or year < 1:
        raise InvalidYear(f"Invalid year: {year!r}. Year must be a positive integer.", year, month, day)
    if not _is_int(month) or not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidMonth(f"Invalid month: {month!r}. Month must be between 1 and 13.", year, month, day)
    max_day = days_in_month(month, year)
    if not _is_int(day) or not 1 <= day <= max_day:
        raise InvalidDay(
            f"Invalid day: {day!r}. Month {month} of {year} has {max_day} days.",
            year, month, day,
            max_allowed=max_day,
        )


def is_valid(year: int, month: int, day: int) -> bool:
    try:
        validate(year, month, day)
    except ValidationError:
        return False
    return True
