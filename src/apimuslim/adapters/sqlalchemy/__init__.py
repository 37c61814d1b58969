"""SQLAlchemy adapter package for API Muslim."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, stats_table
from .repositories import SqlAlchemyHitStatsRepository
from .unit_of_work import (
    SqlAlchemyStatsUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyHitStatsRepository",
    "SqlAlchemyStatsUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
    "stats_table",
]
