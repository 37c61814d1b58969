"""Pydantic models describing maps.co search results."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from apimuslim.domain.geocoding import BoundingBox, GeocodePlace


def _string_values(value: object) -> dict[str, str] | None:
    if not isinstance(value, Mapping):
        return None
    mapping = cast(Mapping[object, object], value)
    output = {str(key): item for key, item in mapping.items() if isinstance(item, str)}
    return output or None


class MapsCoBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SearchResultPayload(MapsCoBaseModel):
    place_id: int
    category: str = Field(alias="class", min_length=1)
    type: str = Field(min_length=1)
    lat: str = Field(min_length=1)
    lon: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    name: str | None = None
    address: dict[str, str] | None = None
    extratags: dict[str, str] | None = None
    boundingbox: tuple[str, str, str, str] | None = None

    @field_validator("place_id", mode="before")
    @classmethod
    def _parse_place_id(cls, value: object) -> object:
        if isinstance(value, str):
            number = float(value)
            if not math.isfinite(number):
                raise ValueError("place_id must be finite")
            return int(number)
        return value

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _coordinate_to_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int | float):
            return str(value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _only_text_name(cls, value: object) -> object:
        return value if isinstance(value, str) else None

    _normalize_records = field_validator("address", "extratags", mode="before")(_string_values)

    @field_validator("boundingbox", mode="before")
    @classmethod
    def _boundingbox_to_text(cls, value: object) -> object:
        if not isinstance(value, Sequence) or isinstance(value, str) or len(value) < 4:
            return None
        south, north, west, east = (str(item) for item in value[:4])
        return south, north, west, east


def to_place(payload: SearchResultPayload) -> GeocodePlace:
    box = None
    if payload.boundingbox is not None:
        south, north, west, east = payload.boundingbox
        box = BoundingBox(south=south, north=north, west=west, east=east)
    return GeocodePlace(
        place_id=payload.place_id,
        category=payload.category,
        type=payload.type,
        lat=payload.lat,
        lon=payload.lon,
        display_name=payload.display_name,
        name=payload.name,
        address=payload.address,
        extratags=payload.extratags,
        boundingbox=box,
    )


def parse_first_result(payload: object) -> GeocodePlace | None:
    """Normalise the first search hit; anything unusable yields ``None``."""

    if not isinstance(payload, list) or not payload:
        return None
    results = cast(list[object], payload)
    try:
        first = SearchResultPayload.model_validate(results[0])
    except ValidationError:
        return None
    return to_place(first)


__all__ = ["SearchResultPayload", "parse_first_result", "to_place"]
