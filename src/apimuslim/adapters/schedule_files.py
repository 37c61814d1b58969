"""Flat JSON files behind the prayer schedule routes."""

from __future__ import annotations

import json
import re
import threading
from logging import getLogger
from typing import TYPE_CHECKING, Final, cast

from apimuslim.domain.sholat.locations import Location, LocationDirectory, build_locations
from apimuslim.domain.sholat.schedules import MonthlySchedule, ScheduleEntry

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

log = getLogger(__name__)

LOCATION_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_-]+$")


class ScheduleFileError(RuntimeError):
    """Raised when a data file exists but cannot be used."""


def _read_json(path: Path) -> object:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def load_locations(path: Path) -> tuple[list[Location], str | None]:
    """Read ``kabkota.json`` and return its locations with the ``fetchedAt`` stamp."""

    try:
        raw = _read_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise ScheduleFileError(f"Cannot read location list {path}") from exc
    if not isinstance(raw, dict):
        raise ScheduleFileError(f"Unexpected location list format in {path}")
    source = cast(dict[str, object], raw)
    groups = source.get("map") or {}
    if not isinstance(groups, dict):
        raise ScheduleFileError(f"Unexpected location map in {path}")
    valid_groups: list[list[Mapping[str, object]]] = []
    for group in cast(dict[str, object], groups).values():
        if isinstance(group, list):
            items = cast(list[object], group)
            valid_groups.append(
                [cast(dict[str, object], item) for item in items if isinstance(item, dict)]
            )
    fetched_at = source.get("fetchedAt")
    locations = build_locations(valid_groups)
    log.info("Loaded %d locations from %s", len(locations), path)
    return locations, fetched_at if isinstance(fetched_at, str) else None


def load_location_directory(path: Path, *, enable_cache: bool = False) -> LocationDirectory:
    locations, fetched_at = load_locations(path)
    return LocationDirectory(
        locations=locations, enable_cache=enable_cache, last_update=fetched_at
    )


def _text(value: object) -> str | None:
    return value if isinstance(value, str) else None


def parse_schedule_file(location_id: str, raw: object) -> MonthlySchedule | None:
    if not isinstance(raw, dict):
        return None
    source = cast(dict[str, object], raw)
    jadwal = source.get("jadwal")
    if not isinstance(jadwal, dict):
        return None
    jadwal_section = cast(dict[str, object], jadwal)
    entries = jadwal_section.get("data")
    if not isinstance(entries, dict):
        return None

    def nested_text(key: str) -> str | None:
        section = source.get(key)
        if isinstance(section, dict):
            return _text(cast(dict[str, object], section).get("text"))
        return None

    return MonthlySchedule(
        id=location_id,
        kabko=_text(jadwal_section.get("kabko")) or nested_text("kab") or "",
        prov=_text(jadwal_section.get("prov")) or nested_text("prov") or "",
        jadwal=cast(dict[str, ScheduleEntry], entries),
    )


class JsonScheduleStore:
    """Reads ``{root}/{year}/{id}-{year}-{MM}.json``; optionally keeps loaded months."""

    def __init__(self, root: Path, *, enable_cache: bool = False) -> None:
        self.root = root
        self.enable_cache = enable_cache
        self._cache: dict[tuple[str, int, int], MonthlySchedule] = {}
        self._lock = threading.Lock()

    def path_for(self, location_id: str, year: int, month: int) -> Path:
        return self.root / f"{year:04d}" / f"{location_id}-{year:04d}-{month:02d}.json"

    def load_month(self, location_id: str, year: int, month: int) -> MonthlySchedule | None:
        if not LOCATION_ID_PATTERN.match(location_id):
            return None
        key = (location_id, year, month)
        if self.enable_cache:
            with self._lock:
                cached = self._cache.get(key)
            if cached is not None:
                return cached

        schedule = self._read(location_id, year, month)
        if schedule is not None and self.enable_cache:
            with self._lock:
                self._cache[key] = schedule
        return schedule

    def _read(self, location_id: str, year: int, month: int) -> MonthlySchedule | None:
        path = self.path_for(location_id, year, month)
        try:
            raw = _read_json(path)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError):
            log.exception("Failed to read schedule for %s %04d-%02d", location_id, year, month)
            return None
        return parse_schedule_file(location_id, raw)


__all__ = [
    "JsonScheduleStore",
    "ScheduleFileError",
    "load_location_directory",
    "load_locations",
    "parse_schedule_file",
]
