"""Hijri to Gregorian conversion by binary search over civil days.

The calendar arithmetic itself stays inside the formatter. This module only
assumes that walking forward one Gregorian day never moves the projected Hijri
date backwards, which makes the day index a sorted search space.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import MAXYEAR, UTC, date, datetime, time
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .zones import create_zoned_date, get_gregorian_parts

if TYPE_CHECKING:
    from apimuslim.domain.ports.calendar import CalendarFormatter

    from .dates import DateParts
    from .methods import CalendarSystem

log = getLogger(__name__)

HIJRI_YEAR_RATIO: Final[float] = 0.97
HIJRI_EPOCH_CE_YEAR: Final[int] = 622
SEARCH_MARGIN_YEARS: Final[int] = 60
MIN_SEARCH_CE_YEAR: Final[int] = 400
# keep one year of headroom so zone offsets never push a candidate past datetime.max
MAX_SEARCH_CE_YEAR: Final[int] = MAXYEAR - 1
MIDDAY: Final[time] = time(12, 0)


@dataclass(frozen=True, slots=True)
class SearchWindow:
    """Inclusive range of proleptic Gregorian ordinals to search."""

    low: int
    high: int

    @property
    def size(self) -> int:
        return max(0, self.high - self.low + 1)


def approximate_ce_year(hijri_year: int) -> int:
    return math.floor((hijri_year - 1) * HIJRI_YEAR_RATIO) + HIJRI_EPOCH_CE_YEAR


def search_window_for(hijri_year: int) -> SearchWindow:
    approx = approximate_ce_year(hijri_year)
    start_year = max(MIN_SEARCH_CE_YEAR, approx - SEARCH_MARGIN_YEARS)
    end_year = min(MAX_SEARCH_CE_YEAR, approx + SEARCH_MARGIN_YEARS)
    if start_year > end_year:
        return SearchWindow(low=1, high=0)
    return SearchWindow(
        low=date(start_year, 1, 1).toordinal(),
        high=date(end_year, 12, 31).toordinal(),
    )


def _midday_instant(ordinal: int) -> datetime:
    return datetime.combine(date.fromordinal(ordinal), MIDDAY, tzinfo=UTC)


def convert_hijri_to_gregorian(
    target: DateParts,
    calendar: CalendarSystem,
    time_zone: str,
    formatter: CalendarFormatter,
) -> datetime | None:
    """Find the instant whose ``calendar`` date in ``time_zone`` equals ``target``.

    Returns civil midnight of the matching Gregorian day in ``time_zone`` or
    ``None`` when the search window holds no exact match (for example day 30 of a
    29-day month).
    """

    window = search_window_for(target.year)
    low, high = window.low, window.high
    steps = 0
    found: datetime | None = None

    while low <= high:
        middle = (low + high) // 2
        candidate = _midday_instant(middle)
        steps += 1
        projected = formatter.project(candidate, time_zone, calendar)
        if projected == target:
            found = candidate
            break
        if projected < target:
            low = middle + 1
        else:
            high = middle - 1

    if found is None:
        log.debug(
            "No %s date matches %s after %s steps", calendar, target.isoformat(), steps
        )
        return None

    # the candidate sits at midday UTC; re-anchor on the zone's civil midnight
    return create_zoned_date(get_gregorian_parts(found, time_zone), time_zone)


__all__ = [
    "SearchWindow",
    "approximate_ce_year",
    "convert_hijri_to_gregorian",
    "search_window_for",
]
