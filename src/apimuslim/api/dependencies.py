"""Request-independent collaborators shared by the routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from collections.abc import Callable

    from apimuslim.config.app import AppConfig
    from apimuslim.domain.calendar.service import CalendarService
    from apimuslim.domain.ports.geocoding import Geocoder
    from apimuslim.domain.ports.schedules import ScheduleStore
    from apimuslim.domain.sholat.imsakiyah import ImsakiyahService
    from apimuslim.domain.sholat.locations import LocationDirectory
    from apimuslim.domain.stats import StatsService


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class ApiContext:
    config: AppConfig
    calendar: CalendarService
    locations: LocationDirectory
    schedules: ScheduleStore
    imsakiyah: ImsakiyahService
    stats: StatsService | None = None
    geocoder: Geocoder | None = None
    clock: Callable[[], datetime] = _utcnow
    started_at: datetime = field(default_factory=_utcnow)

    def uptime_seconds(self) -> int:
        return max(0, int((self.clock() - self.started_at).total_seconds()))


def get_context(request: Request) -> ApiContext:
    return request.app.state.context
