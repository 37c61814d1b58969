from __future__ import annotations

from .logging import (
    ACCESS_LOGGER_NAME,
    DailyFileHandler,
    cleanup_expired_logs,
    configure_access_log,
    configure_logging,
)

__all__ = [
    "ACCESS_LOGGER_NAME",
    "DailyFileHandler",
    "cleanup_expired_logs",
    "configure_access_log",
    "configure_logging",
]
