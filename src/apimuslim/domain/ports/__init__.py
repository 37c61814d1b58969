"""Domain port definitions for adapters."""

from __future__ import annotations

from .calendar import CalendarFormatter
from .geocoding import Geocoder
from .schedules import ScheduleStore
from .stats import HitStatsRepository, StatsUnitOfWork

__all__ = [
    "CalendarFormatter",
    "Geocoder",
    "HitStatsRepository",
    "ScheduleStore",
    "StatsUnitOfWork",
]
