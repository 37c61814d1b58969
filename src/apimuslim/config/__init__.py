"""Application configuration helpers."""

from __future__ import annotations

from .app import AppConfig, get_app_config
from .env import optional_env_var, parse_boolean, parse_positive_int
from .errors import ConfigurationError, MissingConfigurationError
from .geocode import GeocodeConfig, get_geocode_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "AppConfig",
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "GeocodeConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "get_app_config",
    "get_database_config",
    "get_geocode_config",
    "get_storage_config",
    "optional_env_var",
    "parse_boolean",
    "parse_positive_int",
]
