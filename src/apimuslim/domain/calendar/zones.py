"""Time-zone anchored conversions between civil dates and absolute instants."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from functools import lru_cache
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from .dates import DateParts

DEFAULT_TIMEZONE: Final[str] = "Asia/Jakarta"


@lru_cache(maxsize=1)
def _canonical_zone_names() -> dict[str, str]:
    return {name.lower(): name for name in sorted(available_timezones())}


def safe_time_zone(value: str | None, default: str = DEFAULT_TIMEZONE) -> str:
    """Return the canonical spelling of the IANA zone ``value`` names, else ``default``.

    Names match case-insensitively, so ``utc`` and ``ASIA/TOKYO`` resolve to
    ``UTC`` and ``Asia/Tokyo``.
    """

    candidate = (value or "").strip()
    if not candidate:
        return default
    canonical = _canonical_zone_names().get(candidate.lower())
    if canonical is not None:
        return canonical
    try:
        ZoneInfo(candidate)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return default
    return candidate


def create_zoned_date(parts: DateParts, time_zone: str) -> datetime:
    """Return the UTC instant of civil midnight of ``parts`` in ``time_zone``."""

    local_midnight = datetime(parts.year, parts.month, parts.day, tzinfo=ZoneInfo(time_zone))
    return local_midnight.astimezone(UTC)


def get_gregorian_parts(instant: datetime, time_zone: str) -> DateParts:
    local = instant.astimezone(ZoneInfo(time_zone))
    return DateParts(year=local.year, month=local.month, day=local.day)


def shift_zoned_date(instant: datetime, days: int, time_zone: str) -> datetime:
    """Move ``instant`` by whole civil days, landing on midnight in ``time_zone``.

    Days are added to the civil date, so offset changes inside the span never
    move the result onto a neighbouring day.
    """

    if days == 0:
        return instant
    local = get_gregorian_parts(instant, time_zone)
    shifted = date(local.year, local.month, local.day) + timedelta(days=days)
    return create_zoned_date(
        DateParts(year=shifted.year, month=shifted.month, day=shifted.day), time_zone
    )


__all__ = [
    "DEFAULT_TIMEZONE",
    "create_zoned_date",
    "get_gregorian_parts",
    "safe_time_zone",
    "shift_zoned_date",
]
