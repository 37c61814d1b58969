"""Indonesian calendar formatter backed by ``hijridate`` and tabular arithmetic."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Final
from zoneinfo import ZoneInfo

from hijridate import Gregorian

from apimuslim.domain.calendar.dates import DateParts
from apimuslim.domain.calendar.methods import CalendarSystem

from . import hijri_arithmetic

if TYPE_CHECKING:
    from datetime import datetime

    from apimuslim.domain.ports.calendar import CalendarFormatter


WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Senin",
    "Selasa",
    "Rabu",
    "Kamis",
    "Jumat",
    "Sabtu",
    "Minggu",
)
GREGORIAN_MONTH_NAMES: Final[tuple[str, ...]] = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)
HIJRI_MONTH_NAMES: Final[tuple[str, ...]] = (
    "Muharam",
    "Safar",
    "Rabiulawal",
    "Rabiulakhir",
    "Jumadilawal",
    "Jumadilakhir",
    "Rajab",
    "Syakban",
    "Ramadan",
    "Syawal",
    "Zulkaidah",
    "Zulhijah",
)
HIJRI_ERA_SUFFIX: Final[str] = "H"


def _civil_date(instant: datetime, time_zone: str) -> date:
    return instant.astimezone(ZoneInfo(time_zone)).date()


def _umalqura_parts(value: date) -> DateParts:
    try:
        hijri = Gregorian(value.year, value.month, value.day).to_hijri()
    except OverflowError:
        # outside the published Umm al-Qura tables the civil arithmetic takes over
        return DateParts(*hijri_arithmetic.from_gregorian(value))
    return DateParts(year=hijri.year, month=hijri.month, day=hijri.day)


def _civil_parts(value: date) -> DateParts:
    return DateParts(*hijri_arithmetic.from_gregorian(value))


class IndonesianCalendarFormatter:
    """Render instants in Indonesian for the Gregorian and Hijri calendars.

    ``islamic`` and ``islamic-umalqura`` both read the Umm al-Qura tables;
    ``islamic-civil`` uses the tabular calendar with the Friday epoch.
    """

    def project(self, instant: datetime, time_zone: str, calendar: CalendarSystem) -> DateParts:
        civil = _civil_date(instant, time_zone)
        if calendar == CalendarSystem.GREGORY:
            return DateParts(year=civil.year, month=civil.month, day=civil.day)
        if calendar == CalendarSystem.CIVIL:
            return _civil_parts(civil)
        return _umalqura_parts(civil)

    def display_long(self, instant: datetime, time_zone: str, calendar: CalendarSystem) -> str:
        parts = self.project(instant, time_zone, calendar)
        weekday = self.weekday_name(instant, time_zone, calendar)
        month = self._month_label(parts.month, calendar)
        if calendar == CalendarSystem.GREGORY:
            return f"{weekday}, {parts.day} {month} {parts.year}"
        return f"{weekday}, {parts.day} {month} {parts.year} {HIJRI_ERA_SUFFIX}"

    def weekday_name(self, instant: datetime, time_zone: str, calendar: CalendarSystem) -> str:
        _ = calendar
        return WEEKDAY_NAMES[_civil_date(instant, time_zone).weekday()]

    def month_name(self, instant: datetime, time_zone: str, calendar: CalendarSystem) -> str:
        parts = self.project(instant, time_zone, calendar)
        return self._month_label(parts.month, calendar)

    @staticmethod
    def _month_label(month: int, calendar: CalendarSystem) -> str:
        if calendar == CalendarSystem.GREGORY:
            return GREGORIAN_MONTH_NAMES[month - 1]
        return HIJRI_MONTH_NAMES[month - 1]


if TYPE_CHECKING:
    _formatter_check: CalendarFormatter = IndonesianCalendarFormatter()


__all__ = [
    "GREGORIAN_MONTH_NAMES",
    "HIJRI_MONTH_NAMES",
    "WEEKDAY_NAMES",
    "IndonesianCalendarFormatter",
]
