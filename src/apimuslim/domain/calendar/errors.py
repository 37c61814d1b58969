"""Calendar error definitions."""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for calendar requests that cannot be answered."""


class InvalidDateError(CalendarError):
    """Raised when a textual date cannot be parsed for its calendar."""


class ConversionError(CalendarError):
    """Raised when a well-formed Hijri date has no Gregorian counterpart."""


class AdjustmentRangeError(CalendarError):
    """Raised when a day adjustment leaves the representable date range."""


class DateRangeError(CalendarError):
    """Raised when a well-formed date cannot be placed on the time line of a zone."""
