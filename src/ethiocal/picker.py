"""
Non-visual picker logic: the option set a date picker is configured with,
and the decisions it makes from it (disabled days, titles, the payload
handed to change listeners). Rendering and event handling live with the
widget, not here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from .core.errors import InvalidInput
from .core.types import EthiopianDate, Locale
from .engines.conversion import ethiopian_to_gregorian
from .engines.validator import days_in_month
from .presentation.formatting import DEFAULT_PATTERN, check_pattern, format_date, parse_locale
from .presentation.names import month_name

logger = logging.getLogger(__name__)

_LABELS: Mapping[str, Mapping[str, str]] = {
    "today": {"am": "ዛሬ", "en": "Today"},
    "close": {"am": "ዝጋ", "en": "Close"},
}


def _as_date(v: Any, option: str) -> date:
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, EthiopianDate):
        return v.to_gregorian()
    raise InvalidInput(f"Option '{option}' expects a date, got {v!r}", v)


@dataclass(frozen=True)
class PickerOptions:
    """Recognised picker options. Bounds and disabled days are Gregorian dates."""
    locale: Locale = "am"
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    disabled_dates: FrozenSet[date] = frozenset()
    highlight_holidays: bool = True
    show_today_button: bool = True
    date_format: str = DEFAULT_PATTERN

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", parse_locale(self.locale))
        if self.min_date is not None:
            object.__setattr__(self, "min_date", _as_date(self.min_date, "min_date"))
        if self.max_date is not None:
            object.__setattr__(self, "max_date", _as_date(self.max_date, "max_date"))
        object.__setattr__(
            self, "disabled_dates",
            frozenset(_as_date(d, "disabled_dates") for d in self.disabled_dates),
        )
        if self.min_date is not None and self.max_date is not None and self.min_date > self.max_date:
            raise InvalidInput(f"min_date {self.min_date} is after max_date {self.max_date}")
        check_pattern(self.date_format)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "PickerOptions":
        """Build options from a plain mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidInput(f"Unknown picker option(s): {unknown}. Recognised: {sorted(known)}", unknown)
        return cls(**options)

    def toggled_locale(self) -> "PickerOptions":
        return replace(self, locale="en" if self.locale == "am" else "am")


def is_date_disabled(e: EthiopianDate, options: PickerOptions) -> bool:
    g = ethiopian_to_gregorian(e)
    if options.min_date is not None and g < options.min_date:
        logger.debug("%s disabled: before min_date %s", e, options.min_date)
        return True
    if options.max_date is not None and g > options.max_date:
        logger.debug("%s disabled: after max_date %s", e, options.max_date)
        return True
    return g in options.disabled_dates


def month_title(year: int, month: int, locale: str = "am") -> str:
    return f"{month_name(month, locale)} {year}"


def selection(e: EthiopianDate, options: PickerOptions) -> Dict[str, Any]:
    """Payload for a change listener when ``e`` is picked."""
    return {
        "ethiopian": e,
        "gregorian": ethiopian_to_gregorian(e),
        "formatted": format_date(e.year, e.month, e.day, options.locale),
    }


def enabled_days(year: int, month: int, options: PickerOptions) -> Iterable[EthiopianDate]:
    for day in range(1, days_in_month(month, year) + 1):
        e = EthiopianDate(year, month, day)
        if not is_date_disabled(e, options):
            yield e


def today_label(locale: str = "am") -> str:
    return _LABELS["today"][parse_locale(locale)]


def close_label(locale: str = "am") -> str:
    return _LABELS["close"][parse_locale(locale)]
