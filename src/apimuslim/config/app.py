"""Server configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from apimuslim import __version__
from apimuslim.domain.calendar.zones import DEFAULT_TIMEZONE, safe_time_zone

from .env import optional_env_var, parse_boolean, parse_positive_int

PRODUCTION_ENV: Final[str] = "production"
DEFAULT_HOST: Final[str] = "0.0.0.0"  # noqa: S104
DEFAULT_PORT: Final[int] = 8000
DEFAULT_LOG_RETENTION_DAYS: Final[int] = 30


@dataclass(frozen=True, slots=True)
class AppConfig:
    env: str = "development"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    version: str = __version__
    doc_base_url: str | None = None
    timezone: str = DEFAULT_TIMEZONE
    log_verbose: bool = False
    log_write: bool = False
    log_retention_days: int = DEFAULT_LOG_RETENTION_DAYS

    @property
    def is_production(self) -> bool:
        return self.env == PRODUCTION_ENV

    @property
    def enable_cache(self) -> bool:
        return self.is_production

    @property
    def display_host(self) -> str:
        return "localhost" if self.host == DEFAULT_HOST else self.host

    @property
    def base_url(self) -> str:
        return self.doc_base_url or f"http://{self.display_host}:{self.port}"


def get_app_config() -> AppConfig:
    return AppConfig(
        env=(os.getenv("APP_ENV") or "development").strip().lower(),
        host=optional_env_var("HOST") or DEFAULT_HOST,
        port=parse_positive_int(os.getenv("PORT"), DEFAULT_PORT),
        version=optional_env_var("APP_VERSION") or __version__,
        doc_base_url=optional_env_var("DOC_BASE_URL"),
        timezone=safe_time_zone(os.getenv("TIMEZONE"), DEFAULT_TIMEZONE),
        log_verbose=parse_boolean(os.getenv("LOG_VERBOSE"), fallback=False),
        log_write=parse_boolean(os.getenv("LOG_WRITE"), fallback=False),
        log_retention_days=parse_positive_int(
            os.getenv("LOG_RETENTION_DAYS"), DEFAULT_LOG_RETENTION_DAYS
        ),
    )
