"""Date-parts value types and textual date parsing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Final

HIJRI_MAX_DAY: Final[int] = 30
GREGORIAN_MAX_DAY: Final[int] = 31


@dataclass(frozen=True, slots=True, order=True)
class DateParts:
    """A calendar-agnostic ``{year, month, day}`` triple.

    Field order drives the generated comparisons, so instances sort by year, then
    month, then day.
    """

    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True, order=True)
class CePeriod:
    """A Gregorian ``(year, month)`` pair."""

    year: int
    month: int


def _to_integer(raw: str) -> int | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def _split_parts(value: str) -> tuple[int, int, int] | None:
    parts = [part.strip() for part in value.split("-")]
    parts = [part for part in parts if part]
    if len(parts) != 3:
        return None
    numbers = [_to_integer(part) for part in parts]
    year, month, day = numbers
    if year is None or month is None or day is None:
        return None
    return year, month, day


def parse_gregorian_date(value: str) -> DateParts | None:
    """Parse ``YYYY-MM-DD`` as a Gregorian date, rejecting impossible dates."""

    split = _split_parts(value)
    if split is None:
        return None
    year, month, day = split
    if month < 1 or month > 12:
        return None
    if day < 1 or day > GREGORIAN_MAX_DAY:
        return None
    if year < MINYEAR or year > MAXYEAR:
        return None
    try:
        rebuilt = date(year, month, day)
    except ValueError:
        return None
    if (rebuilt.year, rebuilt.month, rebuilt.day) != (year, month, day):
        return None
    return DateParts(year=year, month=month, day=day)


def parse_hijri_date(value: str) -> DateParts | None:
    """Parse ``YYYY-MM-DD`` as a Hijri date.

    Hijri month lengths depend on the calendar variant, so day 30 is accepted here
    for every month and only the converter can tell whether it exists.
    """

    split = _split_parts(value)
    if split is None:
        return None
    year, month, day = split
    if year < 1 or month < 1 or month > 12:
        return None
    if day < 1 or day > HIJRI_MAX_DAY:
        return None
    return DateParts(year=year, month=month, day=day)


def parse_adjustment(value: str | None) -> int:
    """Parse a signed day offset, truncating toward zero; anything unusable is 0."""

    if not value:
        return 0
    try:
        number = float(value)
    except ValueError:
        return 0
    if not math.isfinite(number):
        return 0
    return math.trunc(number)


__all__ = [
    "CePeriod",
    "DateParts",
    "parse_adjustment",
    "parse_gregorian_date",
    "parse_hijri_date",
]
