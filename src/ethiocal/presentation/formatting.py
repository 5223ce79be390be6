from __future__ import annotations

import logging
import re
from typing import Dict, List

from ..core.errors import InvalidIndex, InvalidInput
from ..core.types import EthiopianDate
from ..engines.validator import validate
from .names import day_name, month_name

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "DD/MM/YYYY"

_TOKEN_RE = re.compile(r"YYYY|MM|M|DD|D")
_TOKEN_FIELD = {"YYYY": "year", "MM": "month", "M": "month", "DD": "day", "D": "day"}
_TOKEN_REGEX = {"YYYY": r"\d+", "MM": r"\d{2}", "M": r"\d{1,2}", "DD": r"\d{2}", "D": r"\d{1,2}"}


def format_date(year: int, month: int, day: int, locale: str = "am", include_weekday: bool = False) -> str:
    """
    Human-readable Ethiopian date.

    am: ``"1 መስከረም 2016"``, with weekday ``"ማክሰኞ፣ 1 መስከረም 2016"``
    en: ``"Meskerem 1, 2016"``, with weekday ``"Tuesday, Meskerem 1, 2016"``
    """
    validate(year, month, day)
    mname = month_name(month, locale)

    if locale == "am":
        text = f"{day} {mname} {year}"
        sep = "፣ "
    else:
        text = f"{mname} {day}, {year}"
        sep = ", "

    if include_weekday:
        wd = EthiopianDate(year, month, day).weekday
        text = f"{day_name(wd, locale)}{sep}{text}"
    return text


# ---------------------------------------------------------
# Numeric patterns (DD/MM/YYYY and friends)
# ---------------------------------------------------------

def check_pattern(pattern: str) -> List[str]:
    tokens = _TOKEN_RE.findall(pattern)
    fields = [_TOKEN_FIELD[t] for t in tokens]
    if sorted(fields) != ["day", "month", "year"]:
        raise InvalidInput(f"Date pattern {pattern!r} must contain one year, one month and one day token", pattern)
    return tokens


def format_numeric(e: EthiopianDate, pattern: str = DEFAULT_PATTERN) -> str:
    """Render ``e`` with a pattern built from YYYY, MM, M, DD and D."""
    check_pattern(pattern)
    values = {
        "YYYY": f"{e.year:04d}",
        "MM": f"{e.month:02d}",
        "M": str(e.month),
        "DD": f"{e.day:02d}",
        "D": str(e.day),
    }
    return _TOKEN_RE.sub(lambda m: values[m.group(0)], pattern)


def _compile(pattern: str) -> "re.Pattern[str]":
    check_pattern(pattern)
    parts: List[str] = []
    pos = 0
    for m in _TOKEN_RE.finditer(pattern):
        parts.append(re.escape(pattern[pos:m.start()]))
        tok = m.group(0)
        parts.append(f"(?P<{_TOKEN_FIELD[tok]}>{_TOKEN_REGEX[tok]})")
        pos = m.end()
    parts.append(re.escape(pattern[pos:]))
    return re.compile("".join(parts))


def parse_date(text: str, pattern: str = DEFAULT_PATTERN) -> EthiopianDate:
    """
    Parse ``text`` written in ``pattern`` into an EthiopianDate.

    Text that does not match the pattern raises InvalidInput; a matching
    but impossible date raises the Validator's error.
    """
    if not isinstance(text, str):
        raise InvalidInput(f"Expected a string, got {type(text).__name__}", text)
    m = _compile(pattern).fullmatch(text.strip())
    if m is None:
        logger.debug("parse_date: %r does not match %r", text, pattern)
        raise InvalidInput(f"{text!r} does not match the date pattern {pattern!r}", text)
    parts: Dict[str, int] = {k: int(v) for k, v in m.groupdict().items()}
    return EthiopianDate(parts["year"], parts["month"], parts["day"])


def parse_locale(locale: str) -> str:
    """Normalise a locale tag such as ``"en-US"`` or ``"AM"`` to ``am``/``en``."""
    tag = str(locale).strip().lower().replace("_", "-").split("-")[0]
    if tag not in ("am", "en"):
        raise InvalidIndex(f"Unknown locale '{locale}'. Available: ['am', 'en']", locale)
    return tag
