from __future__ import annotations

import pytest

from apimuslim.domain.calendar import CalendarService
from apimuslim.domain.calendar.methods import STANDAR_SELECTION
from apimuslim.domain.sholat import ImsakiyahService, MonthlySchedule, RamadanScheduleNotFoundError


class FakeScheduleStore:
    def __init__(self, months: set[tuple[int, int]]) -> None:
        self.months = months
        self.requested: list[tuple[str, int, int]] = []

    def load_month(self, location_id: str, year: int, month: int) -> MonthlySchedule | None:
        self.requested.append((location_id, year, month))
        if (year, month) not in self.months:
            return None
        return MonthlySchedule(
            id=location_id, kabko="KOTA JAKARTA", prov="DKI JAKARTA", jadwal={}
        )


def _service(
    calendar_service: CalendarService, months: set[tuple[int, int]]
) -> tuple[ImsakiyahService, FakeScheduleStore]:
    store = FakeScheduleStore(months)
    service = ImsakiyahService(
        calendar=calendar_service, schedules=store, time_zone="Asia/Jakarta"
    )
    return service, store


def test_current_uses_this_hijri_year(calendar_service: CalendarService) -> None:
    service, store = _service(calendar_service, {(2024, 3)})

    schedule = service.current("1301", STANDAR_SELECTION)

    assert schedule.id == "1301"
    assert store.requested == [("1301", 2024, 3)]


def test_for_hijri_year_reports_missing_month(calendar_service: CalendarService) -> None:
    service, _ = _service(calendar_service, set())

    with pytest.raises(RamadanScheduleNotFoundError) as exc:
        service.for_hijri_year("1301", 1446, STANDAR_SELECTION)

    assert str(exc.value) == "Data jadwal tidak tersedia untuk Ramadhan 1446H (2025-03)."


def test_for_hijri_year_unconvertible(calendar_service: CalendarService) -> None:
    service, _ = _service(calendar_service, set())

    with pytest.raises(RamadanScheduleNotFoundError) as exc:
        service.for_hijri_year("1301", 9999, STANDAR_SELECTION)

    assert str(exc.value) == "Gagal mengkonversi tahun Hijriah 9999."


def test_for_ce_year_falls_through_to_later_month(calendar_service: CalendarService) -> None:
    service, store = _service(calendar_service, {(2024, 4)})

    service.for_ce_year("1301", 2024, STANDAR_SELECTION)

    assert store.requested == [("1301", 2024, 3), ("1301", 2024, 4)]


def test_for_ce_year_without_schedule(calendar_service: CalendarService) -> None:
    service, _ = _service(calendar_service, set())

    with pytest.raises(RamadanScheduleNotFoundError) as exc:
        service.for_ce_year("1301", 2023, STANDAR_SELECTION)

    assert str(exc.value) == "Data jadwal tidak tersedia untuk Ramadhan dalam tahun 2023."


def test_for_ce_year_without_ramadan(calendar_service: CalendarService) -> None:
    service, store = _service(calendar_service, set())

    with pytest.raises(RamadanScheduleNotFoundError) as exc:
        service.for_ce_year("1301", 9999, STANDAR_SELECTION)

    assert str(exc.value) == "Tidak ada Ramadhan dalam tahun 9999."
    assert store.requested == []


def test_invalid_zone_falls_back_to_calendar_default(calendar_service: CalendarService) -> None:
    service = ImsakiyahService(
        calendar=calendar_service, schedules=FakeScheduleStore(set()), time_zone="Bad/Zone"
    )

    assert service.time_zone == "Asia/Jakarta"
