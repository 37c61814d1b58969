"""Prayer schedules: locations, monthly files and Ramadan lookups."""

from __future__ import annotations

from .imsakiyah import ImsakiyahService, RamadanScheduleNotFoundError
from .locations import KeywordError, Location, LocationDirectory, build_locations, normalize_keyword
from .schedules import (
    INVALID_PERIOD_MESSAGE,
    MonthlySchedule,
    ScheduleEntry,
    SchedulePeriod,
    parse_schedule_period,
    select_period,
    today_period,
)

__all__ = [
    "INVALID_PERIOD_MESSAGE",
    "ImsakiyahService",
    "KeywordError",
    "Location",
    "LocationDirectory",
    "MonthlySchedule",
    "RamadanScheduleNotFoundError",
    "ScheduleEntry",
    "SchedulePeriod",
    "build_locations",
    "normalize_keyword",
    "parse_schedule_period",
    "select_period",
    "today_period",
]
