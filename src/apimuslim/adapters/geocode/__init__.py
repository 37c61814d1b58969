"""Public interface for the maps.co geocoding adapter."""

from __future__ import annotations

from .client import MapsCoGeocoder, should_cache_results
from .schema import SearchResultPayload, parse_first_result

__all__ = [
    "MapsCoGeocoder",
    "SearchResultPayload",
    "parse_first_result",
    "should_cache_results",
]
