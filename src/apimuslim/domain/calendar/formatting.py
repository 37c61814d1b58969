"""Build display projections of an instant through a calendar formatter."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from .methods import CalendarSystem

if TYPE_CHECKING:
    from datetime import datetime

    from apimuslim.domain.ports.calendar import CalendarFormatter


@dataclass(frozen=True, slots=True)
class DateInfo:
    today: str
    day: int
    day_name: str
    month: int
    month_name: str
    year: int

    def to_payload(self) -> dict[str, object]:
        payload = asdict(self)
        payload["dayName"] = payload.pop("day_name")
        payload["monthName"] = payload.pop("month_name")
        return payload


def _build_info(
    instant: datetime,
    time_zone: str,
    calendar: CalendarSystem,
    formatter: CalendarFormatter,
) -> DateInfo:
    # numeric fields come from their own pass; the long display is not parsed back
    numeric = formatter.project(instant, time_zone, calendar)
    return DateInfo(
        today=formatter.display_long(instant, time_zone, calendar),
        day=numeric.day,
        day_name=formatter.weekday_name(instant, time_zone, calendar),
        month=numeric.month,
        month_name=formatter.month_name(instant, time_zone, calendar),
        year=numeric.year,
    )


def build_ce_info(instant: datetime, time_zone: str, formatter: CalendarFormatter) -> DateInfo:
    return _build_info(instant, time_zone, CalendarSystem.GREGORY, formatter)


def build_hijri_info(
    instant: datetime,
    time_zone: str,
    calendar: CalendarSystem,
    formatter: CalendarFormatter,
) -> DateInfo:
    return _build_info(instant, time_zone, calendar, formatter)


__all__ = ["DateInfo", "build_ce_info", "build_hijri_info"]
