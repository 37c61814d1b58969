"""Geocoding results and failures."""

from __future__ import annotations

from dataclasses import dataclass


class GeocodeError(RuntimeError):
    """Raised when a geocoding request cannot be completed."""


class GeocodeQueueFullError(GeocodeError):
    """Raised when too many geocoding requests are already waiting."""


@dataclass(frozen=True, slots=True)
class BoundingBox:
    south: str
    north: str
    west: str
    east: str


@dataclass(frozen=True, slots=True)
class GeocodePlace:
    place_id: int
    category: str
    type: str
    lat: str
    lon: str
    display_name: str
    name: str | None = None
    address: dict[str, str] | None = None
    extratags: dict[str, str] | None = None
    boundingbox: BoundingBox | None = None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "place_id": self.place_id,
            "class": self.category,
            "type": self.type,
            "lat": self.lat,
            "lon": self.lon,
            "display_name": self.display_name,
        }
        if self.name is not None:
            payload["name"] = self.name
        if self.address is not None:
            payload["address"] = self.address
        if self.extratags is not None:
            payload["extratags"] = self.extratags
        if self.boundingbox is not None:
            box = self.boundingbox
            payload["boundingbox"] = {
                "south": box.south,
                "north": box.north,
                "west": box.west,
                "east": box.east,
            }
        return payload


__all__ = ["BoundingBox", "GeocodeError", "GeocodePlace", "GeocodeQueueFullError"]
