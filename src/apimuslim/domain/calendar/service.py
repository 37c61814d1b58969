"""Calendar use cases: today, Gregorian to Hijri and Hijri to Gregorian."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from .conversion import convert_hijri_to_gregorian
from .dates import parse_adjustment, parse_gregorian_date, parse_hijri_date
from .errors import AdjustmentRangeError, ConversionError, DateRangeError, InvalidDateError
from .formatting import DateInfo, build_ce_info, build_hijri_info
from .methods import CalendarMethod, CalendarSelection, parse_calendar_method
from .ramadan import (
    convert_ramadan_hijri_to_ce,
    get_current_hijri_year,
    get_ramadan_months_for_ce_year,
)
from .zones import (
    DEFAULT_TIMEZONE,
    create_zoned_date,
    get_gregorian_parts,
    safe_time_zone,
    shift_zoned_date,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from apimuslim.domain.ports.calendar import CalendarFormatter

    from .dates import CePeriod
    from .methods import CalendarSystem

log = getLogger(__name__)

INVALID_GREGORIAN_MESSAGE = "Format tanggal Masehi tidak valid. Gunakan YYYY-MM-DD."
INVALID_HIJRI_MESSAGE = "Format tanggal hijriyah tidak valid. Gunakan YYYY-MM-DD."
CONVERSION_FAILED_MESSAGE = (
    "Gagal mengkonversi tanggal hijriyah ke kalender Masehi untuk metode ini."
)
ADJUSTMENT_RANGE_MESSAGE = "Penyesuaian hari di luar jangkauan."
DATE_RANGE_MESSAGE = "Tanggal di luar jangkauan yang didukung."


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class CalendarRequest:
    """Normalised per-request calendar options."""

    selection: CalendarSelection
    time_zone: str
    adjustment: int = 0


@dataclass(frozen=True, slots=True)
class CalendarResult:
    method: CalendarMethod
    adjustment: int
    ce: DateInfo
    hijr: DateInfo

    def to_payload(self) -> dict[str, object]:
        return {
            "method": str(self.method),
            "adjustment": self.adjustment,
            "ce": self.ce.to_payload(),
            "hijr": self.hijr.to_payload(),
        }


class CalendarService:
    """Answer calendar questions for one formatter and one default time zone."""

    def __init__(
        self,
        *,
        formatter: CalendarFormatter,
        default_time_zone: str = DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._formatter = formatter
        self._default_time_zone = safe_time_zone(default_time_zone)
        self._clock = clock

    @property
    def default_time_zone(self) -> str:
        return self._default_time_zone

    def build_request(
        self,
        *,
        method: str | None = None,
        time_zone: str | None = None,
        adjustment: str | None = None,
    ) -> CalendarRequest:
        return CalendarRequest(
            selection=parse_calendar_method(method),
            time_zone=self.safe_time_zone(time_zone),
            adjustment=parse_adjustment(adjustment),
        )

    def safe_time_zone(self, value: str | None) -> str:
        return safe_time_zone(value, self._default_time_zone)

    def today(self, request: CalendarRequest) -> CalendarResult:
        """Describe today in ``request.time_zone``; the adjustment moves only Hijri."""

        tz = request.time_zone
        today = create_zoned_date(get_gregorian_parts(self._clock(), tz), tz)
        hijri_instant = self._shift(today, request.adjustment, tz)
        return self._result(request, ce_instant=today, hijri_instant=hijri_instant)

    def gregorian_to_hijri(self, value: str, request: CalendarRequest) -> CalendarResult:
        parts = parse_gregorian_date(value)
        if parts is None:
            raise InvalidDateError(INVALID_GREGORIAN_MESSAGE)
        tz = request.time_zone
        try:
            base = create_zoned_date(parts, tz)
        except OverflowError as exc:
            raise DateRangeError(DATE_RANGE_MESSAGE) from exc
        hijri_instant = self._shift(base, request.adjustment, tz)
        return self._result(request, ce_instant=base, hijri_instant=hijri_instant)

    def hijri_to_gregorian(self, value: str, request: CalendarRequest) -> CalendarResult:
        parts = parse_hijri_date(value)
        if parts is None:
            raise InvalidDateError(INVALID_HIJRI_MESSAGE)
        tz = request.time_zone
        base = convert_hijri_to_gregorian(
            parts, request.selection.calendar, tz, self._formatter
        )
        if base is None:
            log.info("Hijri date %s not found for %s", value, request.selection.method)
            raise ConversionError(CONVERSION_FAILED_MESSAGE)
        ce_instant = self._shift(base, request.adjustment, tz)
        return self._result(request, ce_instant=ce_instant, hijri_instant=base)

    def current_hijri_year(self, calendar: CalendarSystem, time_zone: str | None = None) -> int:
        return get_current_hijri_year(
            self.safe_time_zone(time_zone), calendar, self._formatter, clock=self._clock
        )

    def ramadan_for_hijri_year(
        self, hijri_year: int, calendar: CalendarSystem, time_zone: str | None = None
    ) -> CePeriod | None:
        return convert_ramadan_hijri_to_ce(
            hijri_year, calendar, self.safe_time_zone(time_zone), self._formatter
        )

    def ramadan_months_for_ce_year(
        self, ce_year: int, calendar: CalendarSystem, time_zone: str | None = None
    ) -> list[CePeriod]:
        return get_ramadan_months_for_ce_year(
            ce_year, calendar, self.safe_time_zone(time_zone), self._formatter
        )

    def _shift(self, instant: datetime, days: int, time_zone: str) -> datetime:
        try:
            return shift_zoned_date(instant, days, time_zone)
        except OverflowError as exc:
            raise AdjustmentRangeError(ADJUSTMENT_RANGE_MESSAGE) from exc

    def _result(
        self,
        request: CalendarRequest,
        *,
        ce_instant: datetime,
        hijri_instant: datetime,
    ) -> CalendarResult:
        tz = request.time_zone
        return CalendarResult(
            method=request.selection.method,
            adjustment=request.adjustment,
            ce=build_ce_info(ce_instant, tz, self._formatter),
            hijr=build_hijri_info(hijri_instant, tz, request.selection.calendar, self._formatter),
        )


__all__ = [
    "CalendarRequest",
    "CalendarResult",
    "CalendarService",
]
