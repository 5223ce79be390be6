from __future__ import annotations

from typing import Any


class EthiopianCalendarError(Exception):
    """Base error."""


class InvalidInput(EthiopianCalendarError, ValueError):
    """Raised for a malformed Gregorian date, unparsable text or unknown option."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ValidationError(EthiopianCalendarError, ValueError):
    """An Ethiopian (year, month, day) triple outside the calendar."""

    def __init__(self, message: str, year: Any = None, month: Any = None, day: Any = None):
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day


OutOfRange = ValidationError


class InvalidYear(ValidationError):
    pass


class InvalidMonth(ValidationError):
    pass


class InvalidDay(ValidationError):
    def __init__(self, message: str, year: Any = None, month: Any = None, day: Any = None, *, max_allowed: int):
        super().__init__(message, year, month, day)
        self.max_allowed = max_allowed


class InvalidIndex(EthiopianCalendarError, IndexError):
    """Raised by name-table lookups for an index or locale outside the table."""

    def __init__(self, message: str, index: Any = None):
        super().__init__(message)
        self.index = index
