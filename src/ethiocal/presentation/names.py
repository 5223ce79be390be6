"""Month and weekday name tables for the two supported locales."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from ..core.errors import InvalidIndex

# Index 0 is Meskerem; Pagume, the 13th month, is last.
MONTH_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "am": (
        "መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት",
        "መጋቢት", "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜ",
    ),
    "en": (
        "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit",
        "Megabit", "Miazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
    ),
})

# Sunday first, matching MonthGridCell.weekday.
DAY_NAMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "am": ("እሁድ", "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ"),
    "en": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
})


def _table(tables: Mapping[str, Tuple[str, ...]], locale: str) -> Tuple[str, ...]:
    if locale not in tables:
        raise InvalidIndex(f"Unknown locale '{locale}'. Available: {sorted(tables)}", locale)
    return tables[locale]


def month_names(locale: str = "am") -> Tuple[str, ...]:
    return _table(MONTH_NAMES, locale)


def day_names(locale: str = "am") -> Tuple[str, ...]:
    return _table(DAY_NAMES, locale)


def month_name(month: int, locale: str = "am") -> str:
    names = month_names(locale)
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= len(names):
        raise InvalidIndex(f"Invalid month: {month!r}", month)
    return names[month - 1]


def day_name(weekday: int, locale: str = "am") -> str:
    """Weekday name for 0=Sunday..6=Saturday."""
    names = day_names(locale)
    if isinstance(weekday, bool) or not isinstance(weekday, int) or not 0 <= weekday < len(names):
        raise InvalidIndex(f"Invalid day index: {weekday!r}", weekday)
    return names[weekday]


def short_day_name(weekday: int, locale: str = "am") -> str:
    """Two-character column header used above month grids."""
    return day_name(weekday, locale)[:2]
