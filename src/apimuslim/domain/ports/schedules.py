"""Port for reading monthly prayer schedules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from apimuslim.domain.sholat.schedules import MonthlySchedule


@runtime_checkable
class ScheduleStore(Protocol):
    """Lookup of one location's schedule for one Gregorian month."""

    def load_month(self, location_id: str, year: int, month: int) -> MonthlySchedule | None: ...


__all__ = ["ScheduleStore"]
