"""Monthly prayer schedules and schedule period parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final, TypedDict
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

INVALID_PERIOD_MESSAGE = "Format tanggal harus YYYY-MM atau YYYY-MM-DD."

_YEAR: Final[re.Pattern[str]] = re.compile(r"^\d{4}$")


class ScheduleEntry(TypedDict, total=False):
    tanggal: str
    imsak: str
    subuh: str
    terbit: str
    dhuha: str
    dzuhur: str
    ashar: str
    maghrib: str
    isya: str


@dataclass(frozen=True, slots=True)
class SchedulePeriod:
    """A month (``day is None``) or a single day of a schedule."""

    year: int
    month: int
    day: int | None = None

    @property
    def is_daily(self) -> bool:
        return self.day is not None

    @property
    def day_key(self) -> str | None:
        if self.day is None:
            return None
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def _parse_int(value: str) -> int | None:
    try:
        number = float(value)
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


def parse_schedule_period(period: str) -> SchedulePeriod | None:
    """Parse ``YYYY-MM`` or ``YYYY-MM-DD``; month and day may omit the zero pad."""

    parts = [part.strip() for part in period.split("-")]
    parts = [part for part in parts if part]
    if len(parts) not in (2, 3):
        return None
    if not _YEAR.match(parts[0]):
        return None
    year = int(parts[0])
    month = _parse_int(parts[1])
    if month is None or not 1 <= month <= 12:
        return None
    if len(parts) == 2:
        return SchedulePeriod(year=year, month=month)
    day = _parse_int(parts[2])
    if day is None or not 1 <= day <= 31:
        return None
    return SchedulePeriod(year=year, month=month, day=day)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def today_period(
    time_zone: str,
    *,
    clock: Callable[[], datetime] = _utcnow,
) -> SchedulePeriod:
    local = clock().astimezone(ZoneInfo(time_zone))
    return SchedulePeriod(year=local.year, month=local.month, day=local.day)


@dataclass(frozen=True, slots=True)
class MonthlySchedule:
    id: str
    kabko: str
    prov: str
    jadwal: Mapping[str, ScheduleEntry]

    def only_day(self, key: str) -> MonthlySchedule | None:
        entry = self.jadwal.get(key)
        if entry is None:
            return None
        return replace(self, jadwal={key: entry})

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "kabko": self.kabko,
            "prov": self.prov,
            "jadwal": dict(self.jadwal),
        }


def select_period(schedule: MonthlySchedule, period: SchedulePeriod) -> MonthlySchedule | None:
    """Narrow ``schedule`` to the requested day; monthly periods pass through."""

    key = period.day_key
    if key is None:
        return schedule
    return schedule.only_day(key)


__all__ = [
    "INVALID_PERIOD_MESSAGE",
    "MonthlySchedule",
    "ScheduleEntry",
    "SchedulePeriod",
    "parse_schedule_period",
    "select_period",
    "today_period",
]
