"""Ramadan (imsakiyah) schedules resolved through the Hijri calendar."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apimuslim.domain.calendar.dates import CePeriod
    from apimuslim.domain.calendar.methods import CalendarSelection
    from apimuslim.domain.calendar.service import CalendarService
    from apimuslim.domain.ports.schedules import ScheduleStore

    from .schedules import MonthlySchedule

log = getLogger(__name__)

CURRENT_RAMADAN_FAILED_MESSAGE = "Gagal menghitung periode Ramadhan untuk tahun ini."


class RamadanScheduleNotFoundError(LookupError):
    """Raised when no Ramadan schedule can be resolved for a request."""


def _period_label(period: CePeriod) -> str:
    return f"{period.year}-{period.month:02d}"


def _missing_hijri_year(hijri_year: int, period: CePeriod) -> RamadanScheduleNotFoundError:
    return RamadanScheduleNotFoundError(
        f"Data jadwal tidak tersedia untuk Ramadhan {hijri_year}H ({_period_label(period)})."
    )


class ImsakiyahService:
    """Map Ramadan of a Hijri or Gregorian year onto stored monthly schedules.

    All lookups use one configured time zone so that the same request always
    resolves to the same month file.
    """

    def __init__(
        self,
        *,
        calendar: CalendarService,
        schedules: ScheduleStore,
        time_zone: str,
    ) -> None:
        self._calendar = calendar
        self._schedules = schedules
        self._time_zone = calendar.safe_time_zone(time_zone)

    @property
    def time_zone(self) -> str:
        return self._time_zone

    def current(self, location_id: str, selection: CalendarSelection) -> MonthlySchedule:
        hijri_year = self._calendar.current_hijri_year(selection.calendar, self._time_zone)
        period = self._calendar.ramadan_for_hijri_year(
            hijri_year, selection.calendar, self._time_zone
        )
        if period is None:
            raise RamadanScheduleNotFoundError(CURRENT_RAMADAN_FAILED_MESSAGE)
        schedule = self._schedules.load_month(location_id, period.year, period.month)
        if schedule is None:
            raise _missing_hijri_year(hijri_year, period)
        return schedule

    def for_hijri_year(
        self, location_id: str, hijri_year: int, selection: CalendarSelection
    ) -> MonthlySchedule:
        period = self._calendar.ramadan_for_hijri_year(
            hijri_year, selection.calendar, self._time_zone
        )
        if period is None:
            raise RamadanScheduleNotFoundError(f"Gagal mengkonversi tahun Hijriah {hijri_year}.")
        schedule = self._schedules.load_month(location_id, period.year, period.month)
        if schedule is None:
            raise _missing_hijri_year(hijri_year, period)
        return schedule

    def for_ce_year(
        self, location_id: str, ce_year: int, selection: CalendarSelection
    ) -> MonthlySchedule:
        """Return the first Ramadan month of ``ce_year`` that has a stored schedule."""

        periods = self._calendar.ramadan_months_for_ce_year(
            ce_year, selection.calendar, self._time_zone
        )
        if not periods:
            raise RamadanScheduleNotFoundError(f"Tidak ada Ramadhan dalam tahun {ce_year}.")
        for period in periods:
            schedule = self._schedules.load_month(location_id, period.year, period.month)
            if schedule is not None:
                return schedule
            log.debug("No schedule for %s in %s", location_id, _period_label(period))
        raise RamadanScheduleNotFoundError(
            f"Data jadwal tidak tersedia untuk Ramadhan dalam tahun {ce_year}."
        )


__all__ = ["ImsakiyahService", "RamadanScheduleNotFoundError"]
