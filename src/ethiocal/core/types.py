from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Literal, Mapping, Optional, Tuple

Locale = Literal["am", "en"]
LOCALES: Tuple[str, ...] = ("am", "en")


@dataclass(frozen=True, order=True)
class EthiopianDate:
    """A validated Ethiopian calendar date.

    Ordering and equality follow (year, month, day), which is also
    chronological order. The weekday is derived, not stored, so a date
    produced by conversion compares equal to one built from the triple.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        from ..engines.validator import validate
        validate(self.year, self.month, self.day)

    @classmethod
    def from_gregorian(cls, g: Any) -> "EthiopianDate":
        from ..engines.conversion import gregorian_to_ethiopian
        return gregorian_to_ethiopian(g)

    @property
    def jdn(self) -> int:
        from ..engines.conversion import ethiopian_to_jdn
        return ethiopian_to_jdn(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """Gregorian weekday of this day, 0=Sunday..6=Saturday."""
        from .time import weekday_of_jdn
        return weekday_of_jdn(self.jdn)

    @property
    def is_leap_year(self) -> bool:
        from ..engines.validator import is_ethiopian_leap
        return is_ethiopian_leap(self.year)

    @property
    def days_in_month(self) -> int:
        from ..engines.validator import days_in_month
        return days_in_month(self.month, self.year)

    def to_gregorian(self) -> date:
        from ..engines.conversion import ethiopian_to_gregorian
        return ethiopian_to_gregorian(self)

    def replace(self, **changes: int) -> "EthiopianDate":
        return replace(self, **changes)

    def format(self, locale: str = "am", include_weekday: bool = False) -> str:
        from ..presentation.formatting import format_date
        return format_date(self.year, self.month, self.day, locale, include_weekday)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class HolidayEntry:
    month: int
    day: int
    names: Mapping[str, str] = field(hash=False)

    def name(self, locale: str = "am") -> str:
        from .errors import InvalidIndex
        if locale not in self.names:
            raise InvalidIndex(f"Unknown locale '{locale}'. Available: {sorted(self.names)}", locale)
        return self.names[locale]


@dataclass(frozen=True)
class MonthGridCell:
    day: int
    weekday: int
    gregorian: date
    is_holiday: bool = False
    holiday: Optional[HolidayEntry] = None

    @property
    def holiday_name(self) -> Optional[Mapping[str, str]]:
        return self.holiday.names if self.holiday is not None else None
