"""Qibla route: bearing to the Kaaba for a coordinate."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path

from apimuslim.api.responses import ApiError, success
from apimuslim.domain.qibla import (
    INVALID_COORDINATE_MESSAGE,
    parse_qibla_coordinate,
    qibla_direction,
)

router = APIRouter(prefix="/qibla", tags=["Qibla"])

CoordinatePath = Annotated[
    str,
    Path(
        description="Koordinat latitude,longitude (derajat desimal).",
        examples=["-6.200000,106.816666"],
    ),
]


@router.get("/{coordinate}", summary="Arah Kiblat")
def qibla(coordinate: CoordinatePath) -> dict[str, object]:
    """Arah kiblat dalam derajat dari utara searah jarum jam."""

    parsed = parse_qibla_coordinate(coordinate)
    if parsed is None:
        raise ApiError(INVALID_COORDINATE_MESSAGE)
    return success(
        {
            "latitude": parsed.latitude,
            "longitude": parsed.longitude,
            "direction": qibla_direction(parsed),
        }
    )
