"""Prayer-schedule locations (kabupaten/kota) and keyword search."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

log = getLogger(__name__)

SEARCH_CACHE_TTL_SECONDS: Final[float] = 10 * 60
MIN_KEYWORD_LETTERS: Final[int] = 3

KEYWORD_REQUIRED_MESSAGE = "keyword is required"
KEYWORD_LETTER_START_MESSAGE = "Keyword harus diawali huruf."
KEYWORD_TOO_SHORT_MESSAGE = "Keyword minimal 3 huruf."

_WHITESPACE = re.compile(r"\s+")
_KABUPATEN = re.compile(r"\bkabupaten\b", re.IGNORECASE)
_NON_LETTERS = re.compile(r"[^a-zA-Z]")


class KeywordError(ValueError):
    """Raised when a location search keyword cannot be used."""


@dataclass(frozen=True, slots=True)
class Location:
    id: str
    lokasi: str

    def to_payload(self) -> dict[str, str]:
        return {"id": self.id, "lokasi": self.lokasi}


def build_locations(groups: Iterable[Sequence[Mapping[str, object]]]) -> list[Location]:
    """Flatten ``{value, text}`` groups into locations, first occurrence wins."""

    by_id: dict[str, Location] = {}
    for group in groups:
        for entry in group:
            value = entry.get("value")
            text = entry.get("text")
            if not isinstance(value, str) or not isinstance(text, str):
                continue
            if not value or not text or value in by_id:
                continue
            by_id[value] = Location(id=value, lokasi=text.strip())
    return list(by_id.values())


def normalize_keyword(value: str) -> str:
    """Collapse whitespace, shorten ``kabupaten`` to ``kab.`` and lower-case."""

    collapsed = _WHITESPACE.sub(" ", value).strip()
    if not collapsed:
        raise KeywordError(KEYWORD_REQUIRED_MESSAGE)
    if not collapsed[0].isascii() or not collapsed[0].isalpha():
        raise KeywordError(KEYWORD_LETTER_START_MESSAGE)
    replaced = _KABUPATEN.sub("kab.", collapsed)
    if len(_NON_LETTERS.sub("", replaced)) < MIN_KEYWORD_LETTERS:
        raise KeywordError(KEYWORD_TOO_SHORT_MESSAGE)
    return replaced.lower()


@dataclass(slots=True)
class _CachedSearch:
    locations: tuple[Location, ...]
    stored_at: float


@dataclass(slots=True)
class LocationDirectory:
    """In-memory index of locations with an optional search cache."""

    locations: Sequence[Location]
    enable_cache: bool = False
    last_update: str | None = None
    cache_ttl_seconds: float = SEARCH_CACHE_TTL_SECONDS
    clock: Callable[[], float] = time.monotonic
    _index: dict[str, Location] = field(init=False, repr=False)
    _cache: dict[str, _CachedSearch] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        self._index = {location.id: location for location in self.locations}

    def all(self) -> list[Location]:
        return list(self.locations)

    def find_by_id(self, location_id: str) -> Location | None:
        key = location_id.strip()
        if not key:
            return None
        return self._index.get(key)

    def search(self, needle: str) -> list[Location]:
        """Substring search over lower-cased names; ``needle`` must be normalised."""

        cached = self._cached(needle)
        if cached is not None:
            return list(cached)
        result = [location for location in self.locations if needle in location.lokasi.lower()]
        if result and self.enable_cache:
            self._cache[needle] = _CachedSearch(tuple(result), self.clock())
        return result

    def _cached(self, needle: str) -> tuple[Location, ...] | None:
        if not self.enable_cache:
            return None
        entry = self._cache.get(needle)
        if entry is None:
            return None
        if self.clock() - entry.stored_at > self.cache_ttl_seconds:
            del self._cache[needle]
            return None
        log.debug("Location search cache hit for %r", needle)
        return entry.locations


__all__ = [
    "KeywordError",
    "Location",
    "LocationDirectory",
    "build_locations",
    "normalize_keyword",
]
