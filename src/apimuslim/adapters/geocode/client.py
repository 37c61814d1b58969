"""maps.co forward geocoding client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from apimuslim.adapters.http_resilience import ResilientClient
from apimuslim.domain.geocoding import GeocodeError, GeocodeQueueFullError

from .schema import parse_first_result

if TYPE_CHECKING:
    from collections.abc import Callable

    from apimuslim.config.geocode import GeocodeConfig
    from apimuslim.config.http_resilience import ResilienceConfig
    from apimuslim.domain.geocoding import GeocodePlace

log = getLogger(__name__)

SEARCH_PATH = "/search"
QUEUE_FULL_MESSAGE = "Geocode queue is full"


def should_cache_results(payload: object) -> bool:
    """Only non-empty result lists are worth keeping."""

    return isinstance(payload, list) and bool(payload)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class MapsCoGeocoder:
    """Geocoder backed by ``geocode.maps.co/search``.

    Requests share one rate-limited client; at most ``config.max_queue`` of them may
    wait for their turn before new ones are refused.
    """

    def __init__(
        self,
        config: GeocodeConfig,
        *,
        client_factory: Callable[[ResilienceConfig], ResilientClient] = _default_client_factory,
    ) -> None:
        self.config = config
        self._client_factory = client_factory
        self._client: ResilientClient | None = None
        self._pending = 0

    @property
    def pending(self) -> int:
        return self._pending

    async def search(self, query: str) -> GeocodePlace | None:
        api_key = self.config.require_api_key()
        if self._pending >= self.config.max_queue:
            raise GeocodeQueueFullError(QUEUE_FULL_MESSAGE)

        self._pending += 1
        try:
            response = await self._get_client().get(
                SEARCH_PATH, params={"q": query, "api_key": api_key}
            )
        except httpx.HTTPError as exc:
            raise GeocodeError(f"Geocode request failed: {exc}") from exc
        finally:
            self._pending -= 1

        if response.is_error:
            raise GeocodeError(f"Geocode request failed ({response.status_code})")
        try:
            payload = response.json()
        except ValueError as exc:
            raise GeocodeError("Geocode response is not JSON") from exc

        place = parse_first_result(payload)
        if place is None:
            log.info("No usable geocode result for %r", query)
        return place

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> ResilientClient:
        if self._client is None:
            self._client = self._client_factory(self.config.resilience)
        return self._client
