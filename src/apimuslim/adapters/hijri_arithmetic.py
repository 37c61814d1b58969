"""Tabular (civil) Islamic calendar arithmetic.

The civil calendar alternates 30 and 29 day months and inserts a leap day in the
last month of years 2, 5, 7, 10, 13, 16, 18, 21, 24, 26 and 29 of every 30 year
cycle, counting from the Friday epoch 16 July 622 (Julian).
"""

from __future__ import annotations

from datetime import date
from typing import Final

CIVIL_EPOCH_JDN: Final[int] = 1948440
CYCLE_DAYS: Final[int] = 10631
ORDINAL_TO_JDN: Final[int] = 1721425


def is_leap_year(year: int) -> bool:
    return (14 + 11 * year) % 30 < 11


def month_length(year: int, month: int) -> int:
    if month == 12 and is_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29


def to_jdn(year: int, month: int, day: int) -> int:
    return (
        day
        + (59 * (month - 1) + 1) // 2
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + CIVIL_EPOCH_JDN
        - 1
    )


def from_jdn(jdn: int) -> tuple[int, int, int]:
    year = (30 * (jdn - CIVIL_EPOCH_JDN) + 10646) // CYCLE_DAYS
    into_year = jdn - (29 + to_jdn(year, 1, 1))
    month = min(12, -(-2 * into_year // 59) + 1)
    day = jdn - to_jdn(year, month, 1) + 1
    return year, month, day


def from_gregorian(value: date) -> tuple[int, int, int]:
    return from_jdn(value.toordinal() + ORDINAL_TO_JDN)


def to_gregorian(year: int, month: int, day: int) -> date:
    return date.fromordinal(to_jdn(year, month, day) - ORDINAL_TO_JDN)


__all__ = [
    "from_gregorian",
    "from_jdn",
    "is_leap_year",
    "month_length",
    "to_gregorian",
    "to_jdn",
]
