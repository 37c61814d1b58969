"""Hijri/Gregorian calendar engine."""

from __future__ import annotations

from .conversion import convert_hijri_to_gregorian, search_window_for
from .dates import CePeriod, DateParts, parse_adjustment, parse_gregorian_date, parse_hijri_date
from .errors import (
    AdjustmentRangeError,
    CalendarError,
    ConversionError,
    DateRangeError,
    InvalidDateError,
)
from .formatting import DateInfo, build_ce_info, build_hijri_info
from .methods import (
    HIJRI_CALENDARS,
    CalendarMethod,
    CalendarSelection,
    CalendarSystem,
    parse_calendar_method,
)
from .ramadan import (
    convert_ramadan_hijri_to_ce,
    get_current_hijri_year,
    get_ramadan_months_for_ce_year,
)
from .service import CalendarRequest, CalendarResult, CalendarService
from .zones import (
    DEFAULT_TIMEZONE,
    create_zoned_date,
    get_gregorian_parts,
    safe_time_zone,
    shift_zoned_date,
)

__all__ = [
    "DEFAULT_TIMEZONE",
    "HIJRI_CALENDARS",
    "AdjustmentRangeError",
    "CalendarError",
    "CalendarMethod",
    "CalendarRequest",
    "CalendarResult",
    "CalendarSelection",
    "CalendarService",
    "CalendarSystem",
    "CePeriod",
    "ConversionError",
    "DateInfo",
    "DateParts",
    "DateRangeError",
    "InvalidDateError",
    "build_ce_info",
    "build_hijri_info",
    "convert_hijri_to_gregorian",
    "convert_ramadan_hijri_to_ce",
    "create_zoned_date",
    "get_current_hijri_year",
    "get_gregorian_parts",
    "get_ramadan_months_for_ce_year",
    "parse_adjustment",
    "parse_calendar_method",
    "parse_gregorian_date",
    "parse_hijri_date",
    "safe_time_zone",
    "search_window_for",
    "shift_zoned_date",
]
