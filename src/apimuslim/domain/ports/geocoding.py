"""Port for forward geocoding providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from apimuslim.domain.geocoding import GeocodePlace


@runtime_checkable
class Geocoder(Protocol):
    async def search(self, query: str) -> GeocodePlace | None:
        """Return the best match for ``query`` or ``None`` when nothing usable came back."""
        ...

    async def aclose(self) -> None: ...


__all__ = ["Geocoder"]
