"""Qibla bearing from a ``latitude,longitude`` coordinate."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

KAABA_LATITUDE: Final[float] = 21.4225241
KAABA_LONGITUDE: Final[float] = 39.8261818
INVALID_COORDINATE_MESSAGE: Final[str] = "Koordinat tidak valid."


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


def _to_degrees(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_qibla_coordinate(value: str) -> Coordinate | None:
    """Parse ``"lat,lng"`` in decimal degrees, or return ``None``.

    Both parts are required and must lie within [-90, 90] and [-180, 180].
    """

    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 2:
        return None
    latitude, longitude = (_to_degrees(part) for part in parts)
    if latitude is None or longitude is None:
        return None
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        return None
    return Coordinate(latitude=latitude, longitude=longitude)


def qibla_direction(coordinate: Coordinate) -> float:
    """Initial great-circle bearing to the Kaaba, clockwise from true north."""

    latitude = math.radians(coordinate.latitude)
    kaaba_latitude = math.radians(KAABA_LATITUDE)
    delta = math.radians(KAABA_LONGITUDE - coordinate.longitude)

    x = math.sin(delta) * math.cos(kaaba_latitude)
    y = math.cos(latitude) * math.sin(kaaba_latitude) - math.sin(latitude) * math.cos(
        kaaba_latitude
    ) * math.cos(delta)
    return math.degrees(math.atan2(x, y)) % 360


__all__ = [
    "INVALID_COORDINATE_MESSAGE",
    "KAABA_LATITUDE",
    "KAABA_LONGITUDE",
    "Coordinate",
    "parse_qibla_coordinate",
    "qibla_direction",
]
