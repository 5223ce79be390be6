"""
ethiocal.engines.conversion
---------------------------
Gregorian <-> Ethiopian conversion. Both directions go through the
Julian Day Number, so every Ethiopian date maps to exactly one day count
and back.

The Ethiopian year starts on 1 Meskerem: September 11 of the Gregorian
year, or September 12 in the Gregorian year preceding a Gregorian leap
year (valid for 1900-2099; other centuries drift with the Gregorian
century rule, which the day count handles without special cases).
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional, Union

from ..core.errors import InvalidInput, InvalidYear
from ..core.time import MAX_JDN, from_jdn, to_jdn
from ..core.types import EthiopianDate
from .validator import validate

logger = logging.getLogger(__name__)

# JDN of 1 Meskerem, year 1 (Amete Mihret era).
EPOCH_JDN = 1724221

EthiopianLike = Union[EthiopianDate, int]


# ---------------------------------------------------------
# Day counts
# ---------------------------------------------------------

def ethiopian_to_jdn(year: int, month: int, day: int) -> int:
    """Day count of an Ethiopian date. No validation; callers check first."""
    return EPOCH_JDN - 1 + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day


def new_year_jdn(ethiopian_year: int) -> int:
    return ethiopian_to_jdn(ethiopian_year, 1, 1)


def new_year_date(ethiopian_year: int) -> date:
    """Gregorian date of 1 Meskerem of ``ethiopian_year``."""
    validate(ethiopian_year, 1, 1)
    return from_jdn(new_year_jdn(ethiopian_year))


def new_year_offset(gregorian_year: int) -> int:
    """
    Day of September on which the Ethiopian year beginning in
    ``gregorian_year`` starts: 11, or 12 before a Gregorian leap year.
    Far from the present the value leaves 11..12 (it is 1-based from
    September 1 and can be < 1 in the first centuries).
    """
    return new_year_jdn(gregorian_year - 7) - to_jdn(date(gregorian_year, 9, 1)) + 1


# ---------------------------------------------------------
# Gregorian -> Ethiopian
# ---------------------------------------------------------

def _coerce_gregorian(g: Any) -> date:
    if isinstance(g, datetime):
        return g.date()
    if isinstance(g, date):
        return g
    if isinstance(g, (tuple, list)) and len(g) == 3:
        try:
            return date(*g)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Invalid Gregorian date {tuple(g)!r}: {e}", g) from e
    raise InvalidInput(f"Invalid date provided: {g!r}. Expected a date or (year, month, day).", g)


def gregorian_to_ethiopian(g: Any) -> EthiopianDate:
    """
    Convert a Gregorian date (``date``, ``datetime`` or ``(y, m, d)``) to
    an EthiopianDate. The result's ``weekday`` is the weekday of ``g``.
    """
    d = _coerce_gregorian(g)
    jdn = to_jdn(d)

    # Year whose 1 Meskerem falls in d.year; before it we are still in the
    # previous Ethiopian year.
    year = d.year - 7
    start = new_year_jdn(year)
    if jdn < start:
        year -= 1
        start = new_year_jdn(year)

    if year < 1:
        raise InvalidInput(f"{d.isoformat()} precedes 1 Meskerem of Ethiopian year 1", g)

    days_since_new_year = jdn - start
    # 30-day months; days 360..365 land in Pagume.
    month, day = divmod(days_since_new_year, 30)
    return EthiopianDate(year, month + 1, day + 1)


# ---------------------------------------------------------
# Ethiopian -> Gregorian
# ---------------------------------------------------------

def _coerce_ethiopian(e: EthiopianLike, month: Optional[int], day: Optional[int]) -> tuple[int, int, int]:
    if isinstance(e, EthiopianDate):
        if month is not None or day is not None:
            raise TypeError("month/day must not be given together with an EthiopianDate")
        return e.as_tuple()
    return e, month, day  # type: ignore[return-value]


def ethiopian_to_gregorian(e: EthiopianLike, month: Optional[int] = None, day: Optional[int] = None) -> date:
    """
    Convert an Ethiopian date to a Gregorian ``date``.

    Accepts an EthiopianDate or the triple ``(year, month, day)``. Raises
    the Validator's error for an invalid triple, and InvalidYear when the
    result lies beyond ``datetime.date.max``.
    """
    y, m, d = _coerce_ethiopian(e, month, day)
    validate(y, m, d)

    day_of_year = (m - 1) * 30 + d
    jdn = new_year_jdn(y) + day_of_year - 1
    if jdn > MAX_JDN:
        raise InvalidYear(f"Ethiopian year {y} is beyond the supported Gregorian range", y, m, d)
    return from_jdn(jdn)


# ---------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------

def add_days(e: EthiopianDate, n: int) -> EthiopianDate:
    """Return the Ethiopian date ``n`` days after ``e`` (``n`` may be negative)."""
    jdn = e.jdn + n
    if jdn < EPOCH_JDN or jdn > MAX_JDN:
        raise InvalidYear(f"{e} {n:+d} days is outside the supported range", e.year, e.month, e.day)
    return gregorian_to_ethiopian(from_jdn(jdn))


def days_between(a: EthiopianDate, b: EthiopianDate) -> int:
    """Signed number of days from ``a`` to ``b``."""
    return b.jdn - a.jdn


def today(clock: Optional[Callable[[], date]] = None) -> EthiopianDate:
    """Today's Ethiopian date from the host clock (or ``clock()`` if given)."""
    now = (clock or date.today)()
    e = gregorian_to_ethiopian(now)
    logger.debug("today: %s -> %s", now, e)
    return e
