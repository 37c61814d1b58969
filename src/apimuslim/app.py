"""Application assembly: wire configuration and adapters into the HTTP app."""

from __future__ import annotations

import logging
from logging import getLogger
from typing import TYPE_CHECKING

from apimuslim.adapters.calendar_formatter import IndonesianCalendarFormatter
from apimuslim.adapters.geocode import MapsCoGeocoder, should_cache_results
from apimuslim.adapters.schedule_files import (
    JsonScheduleStore,
    ScheduleFileError,
    load_location_directory,
)
from apimuslim.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyStatsUnitOfWork,
    is_started,
    startup,
)
from apimuslim.api import ApiContext, create_app
from apimuslim.common.logging import cleanup_expired_logs, configure_access_log, configure_logging
from apimuslim.config import (
    get_app_config,
    get_database_config,
    get_geocode_config,
    get_storage_config,
)
from apimuslim.domain.calendar import CalendarService
from apimuslim.domain.sholat import ImsakiyahService, LocationDirectory
from apimuslim.domain.stats import StatsService

if TYPE_CHECKING:
    from fastapi import FastAPI

    from apimuslim.config import AppConfig, StorageConfig
    from apimuslim.domain.ports.calendar import CalendarFormatter
    from apimuslim.domain.ports.geocoding import Geocoder

log = getLogger(__name__)


def _load_directory(storage: StorageConfig, *, enable_cache: bool) -> LocationDirectory:
    try:
        return load_location_directory(storage.kabkota_path, enable_cache=enable_cache)
    except ScheduleFileError:
        log.warning("Location list unavailable, serving an empty directory", exc_info=True)
        return LocationDirectory(locations=[], enable_cache=enable_cache)


def _build_stats(app_config: AppConfig, storage: StorageConfig) -> StatsService:
    if not is_started():
        startup(database_uri=get_database_config(storage=storage).uri)
    return StatsService(SqlAlchemyStatsUnitOfWork, time_zone=app_config.timezone)


def build_context(
    app_config: AppConfig,
    storage: StorageConfig,
    *,
    formatter: CalendarFormatter | None = None,
    stats: StatsService | None = None,
    geocoder: Geocoder | None = None,
    enable_stats: bool = True,
    enable_geocode: bool = True,
) -> ApiContext:
    """Assemble the collaborators shared by every route.

    Explicit ``stats`` or ``geocoder`` arguments replace the default adapters;
    the ``enable_*`` switches leave the feature out entirely.
    """

    calendar = CalendarService(
        formatter=formatter or IndonesianCalendarFormatter(),
        default_time_zone=app_config.timezone,
    )
    schedules = JsonScheduleStore(storage.jadwal_dir, enable_cache=app_config.enable_cache)
    if stats is None and enable_stats:
        stats = _build_stats(app_config, storage)
    if geocoder is None and enable_geocode:
        geocoder = MapsCoGeocoder(get_geocode_config(cache_predicate=should_cache_results))
    return ApiContext(
        config=app_config,
        calendar=calendar,
        locations=_load_directory(storage, enable_cache=app_config.enable_cache),
        schedules=schedules,
        imsakiyah=ImsakiyahService(
            calendar=calendar, schedules=schedules, time_zone=app_config.timezone
        ),
        stats=stats,
        geocoder=geocoder,
    )


def prepare_logging(app_config: AppConfig, storage: StorageConfig) -> None:
    configure_logging(level=logging.DEBUG if app_config.log_verbose else logging.INFO)
    log_dir = storage.log_dir if app_config.log_write else None
    configure_access_log(
        verbose=app_config.log_verbose, log_dir=log_dir, time_zone=app_config.timezone
    )
    if log_dir is not None:
        removed = cleanup_expired_logs(log_dir, retention_days=app_config.log_retention_days)
        if removed:
            log.info("Removed %d expired log files", len(removed))


def build_application() -> FastAPI:
    """Create the application from the environment; used as the uvicorn factory."""

    app_config = get_app_config()
    storage = get_storage_config()
    prepare_logging(app_config, storage)
    return create_app(build_context(app_config, storage))


__all__ = ["build_application", "build_context", "prepare_logging"]
