"""Locate Ramadan (Hijri month 9) on the Gregorian calendar."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, UTC, datetime
from typing import TYPE_CHECKING, Final

from .conversion import convert_hijri_to_gregorian
from .dates import CePeriod, DateParts
from .zones import create_zoned_date, get_gregorian_parts

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from apimuslim.domain.ports.calendar import CalendarFormatter

    from .methods import CalendarSystem

RAMADAN_MONTH: Final[int] = 9
DEFAULT_SAMPLE_DAYS: Final[tuple[int, ...]] = (1, 15)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def get_current_hijri_year(
    time_zone: str,
    calendar: CalendarSystem,
    formatter: CalendarFormatter,
    *,
    clock: Callable[[], datetime] = _utcnow,
) -> int:
    return formatter.project(clock(), time_zone, calendar).year


def convert_ramadan_hijri_to_ce(
    hijri_year: int,
    calendar: CalendarSystem,
    time_zone: str,
    formatter: CalendarFormatter,
) -> CePeriod | None:
    """Return the Gregorian month holding 1 Ramadan of ``hijri_year``."""

    start = convert_hijri_to_gregorian(
        DateParts(year=hijri_year, month=RAMADAN_MONTH, day=1),
        calendar,
        time_zone,
        formatter,
    )
    if start is None:
        return None
    parts = get_gregorian_parts(start, time_zone)
    return CePeriod(year=parts.year, month=parts.month)


def get_ramadan_months_for_ce_year(
    ce_year: int,
    calendar: CalendarSystem,
    time_zone: str,
    formatter: CalendarFormatter,
    *,
    sample_days: Sequence[int] = DEFAULT_SAMPLE_DAYS,
) -> list[CePeriod]:
    """List the months of ``ce_year`` in which sampled days fall in Ramadan.

    A Gregorian year can hold zero, one or two Ramadan starts; the result keeps
    calendar order and holds each month at most once.
    """

    # the first and last years cannot be shifted into every zone
    if ce_year <= MINYEAR or ce_year >= MAXYEAR:
        return []

    periods: list[CePeriod] = []
    for month in range(1, 13):
        period = CePeriod(year=ce_year, month=month)
        for day in sample_days:
            instant = create_zoned_date(DateParts(year=ce_year, month=month, day=day), time_zone)
            if formatter.project(instant, time_zone, calendar).month != RAMADAN_MONTH:
                continue
            periods.append(period)
            break
    return periods


__all__ = [
    "DEFAULT_SAMPLE_DAYS",
    "RAMADAN_MONTH",
    "convert_ramadan_hijri_to_ce",
    "get_current_hijri_year",
    "get_ramadan_months_for_ce_year",
]
