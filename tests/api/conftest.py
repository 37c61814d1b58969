from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from apimuslim.adapters.schedule_files import JsonScheduleStore, load_location_directory
from apimuslim.api import ApiContext, create_app
from apimuslim.config.app import AppConfig
from apimuslim.domain.sholat import ImsakiyahService
from apimuslim.domain.stats import StatsService
from tests.helpers.calendar import FIXED_NOW, fixed_clock

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from apimuslim.adapters.sqlalchemy import SqlAlchemyStatsUnitOfWork
    from apimuslim.config.storage import StorageConfig
    from apimuslim.domain.calendar import CalendarService
    from apimuslim.domain.geocoding import GeocodePlace


class FakeGeocoder:
    def __init__(self) -> None:
        self.result: GeocodePlace | None = None
        self.error: Exception | None = None
        self.queries: list[str] = []
        self.closed = False

    async def search(self, query: str) -> GeocodePlace | None:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.result

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(env="test", version="9.9.9", timezone="Asia/Jakarta")


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def api_context(
    app_config: AppConfig,
    storage: StorageConfig,
    calendar_service: CalendarService,
    geocoder: FakeGeocoder,
    stats_unit_of_work: Callable[[], SqlAlchemyStatsUnitOfWork],
) -> ApiContext:
    schedules = JsonScheduleStore(storage.jadwal_dir)
    return ApiContext(
        config=app_config,
        calendar=calendar_service,
        locations=load_location_directory(storage.kabkota_path),
        schedules=schedules,
        imsakiyah=ImsakiyahService(
            calendar=calendar_service, schedules=schedules, time_zone=app_config.timezone
        ),
        stats=StatsService(
            stats_unit_of_work, time_zone=app_config.timezone, clock=fixed_clock()
        ),
        geocoder=geocoder,
        clock=fixed_clock(),
        started_at=FIXED_NOW - timedelta(seconds=90_061),
    )


@pytest.fixture
def client(api_context: ApiContext) -> Iterator[TestClient]:
    with TestClient(create_app(api_context)) as test_client:
        yield test_client
