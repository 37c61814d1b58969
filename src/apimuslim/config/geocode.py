"""Geocoding provider configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var
from .errors import MissingConfigurationError
from .http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
    ShouldCacheHook,
)

MAPSCO_BASE_URL: Final[str] = "https://geocode.maps.co"
MAPSCO_TIMEOUT_SECONDS: Final[float] = 10.0
MAX_QUEUED_REQUESTS: Final[int] = 60


@dataclass(frozen=True, slots=True)
class GeocodeConfig:
    """maps.co settings; a missing ``api_key`` leaves the provider disabled."""

    api_key: str | None
    resilience: ResilienceConfig
    max_queue: int = MAX_QUEUED_REQUESTS

    @property
    def enabled(self) -> bool:
        return self.api_key is not None

    def require_api_key(self) -> str:
        if self.api_key is None:
            raise MissingConfigurationError("Missing configuration for: MAPSCO_API_KEY")
        return self.api_key


def default_geocode_resilience(
    *, cache_predicate: ShouldCacheHook | None = None
) -> ResilienceConfig:
    return ResilienceConfig(
        name="mapsco",
        base_url=MAPSCO_BASE_URL,
        timeout_seconds=MAPSCO_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        retry=RetryPolicy(total=2),
        cache=CacheConfig(
            backend="memory",
            default_ttl_seconds=24 * 3600,
            should_cache=cache_predicate,
        ),
        default_headers={"Accept": "application/json"},
    )


def get_geocode_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> GeocodeConfig:
    return GeocodeConfig(
        api_key=optional_env_var("MAPSCO_API_KEY"),
        resilience=resilience or default_geocode_resilience(cache_predicate=cache_predicate),
    )
