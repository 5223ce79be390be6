"""
Fixed Ethiopian holidays keyed by (month, day).

Siklet (Good Friday) and Fasika (Easter) move every year with the
Orthodox Easter computus; here they sit on fixed dates.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Tuple

from ..core.types import HolidayEntry


def _entry(month: int, day: int, am: str, en: str) -> HolidayEntry:
    return HolidayEntry(month, day, MappingProxyType({"am": am, "en": en}))


HOLIDAYS: Tuple[HolidayEntry, ...] = (
    _entry(1, 1, "እንቁጣጣሽ", "Enkutatash (New Year)"),
    _entry(1, 17, "መስቀል", "Meskel (Finding of True Cross)"),
    _entry(4, 29, "ገና", "Genna (Christmas)"),
    _entry(5, 11, "ጥምቀት", "Timkat (Epiphany)"),
    # TODO: compute from the Orthodox Easter date instead of fixing them.
    _entry(9, 23, "ስቅለት", "Siklet (Good Friday)"),
    _entry(9, 25, "ፋሲካ", "Fasika (Easter)"),
)


def is_holiday(month: int, day: int) -> Optional[HolidayEntry]:
    for h in HOLIDAYS:
        if h.month == month and h.day == day:
            return h
    return None


def holidays_in_month(month: int) -> Tuple[HolidayEntry, ...]:
    return tuple(h for h in HOLIDAYS if h.month == month)
