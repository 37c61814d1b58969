from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.pool import StaticPool

from apimuslim.adapters.sqlalchemy.mappings import create_all_tables
from apimuslim.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyStatsUnitOfWork,
    shutdown,
    startup,
)
from apimuslim.config.storage import StorageConfig
from apimuslim.domain.calendar import CalendarService
from tests.helpers.calendar import FakeCalendarFormatter, fixed_clock
from tests.helpers.data_files import write_kabkota, write_schedule

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def formatter() -> FakeCalendarFormatter:
    return FakeCalendarFormatter()


@pytest.fixture
def calendar_service(formatter: FakeCalendarFormatter) -> CalendarService:
    return CalendarService(
        formatter=formatter, default_time_zone="Asia/Jakarta", clock=fixed_clock()
    )


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    config = StorageConfig(data_dir=tmp_path / "data")
    write_kabkota(config.sholat_dir)
    write_schedule(config.jadwal_dir, "1301", 2024, 3, (15, 20, 21))
    write_schedule(config.jadwal_dir, "1301", 2024, 4, (1, 2))
    return config


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    # one shared connection so threadpool requests see the same in-memory database
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def stats_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyStatsUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield SqlAlchemyStatsUnitOfWork
    finally:
        shutdown()
