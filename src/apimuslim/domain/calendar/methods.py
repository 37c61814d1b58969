"""Calendar method aliases and the calendar systems behind them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final


class CalendarMethod(StrEnum):
    STANDAR = "standar"
    UMALQURA = "islamic-umalqura"
    CIVIL = "islamic-civil"


class CalendarSystem(StrEnum):
    """Calendar identifiers understood by a :class:`CalendarFormatter`."""

    GREGORY = "gregory"
    ISLAMIC = "islamic"
    UMALQURA = "islamic-umalqura"
    CIVIL = "islamic-civil"


HIJRI_CALENDARS: Final[frozenset[CalendarSystem]] = frozenset(
    {CalendarSystem.ISLAMIC, CalendarSystem.UMALQURA, CalendarSystem.CIVIL}
)


@dataclass(frozen=True, slots=True)
class CalendarSelection:
    method: CalendarMethod
    calendar: CalendarSystem


STANDAR_SELECTION: Final = CalendarSelection(CalendarMethod.STANDAR, CalendarSystem.ISLAMIC)
UMALQURA_SELECTION: Final = CalendarSelection(CalendarMethod.UMALQURA, CalendarSystem.UMALQURA)
CIVIL_SELECTION: Final = CalendarSelection(CalendarMethod.CIVIL, CalendarSystem.CIVIL)

METHOD_ALIASES: Final = MappingProxyType(
    {
        "standar": STANDAR_SELECTION,
        "standard": STANDAR_SELECTION,
        "locale": STANDAR_SELECTION,
        "default": STANDAR_SELECTION,
        "islamic": STANDAR_SELECTION,
        "islamic-umalqura": UMALQURA_SELECTION,
        "umalqura": UMALQURA_SELECTION,
        "islamic-civil": CIVIL_SELECTION,
        "civil": CIVIL_SELECTION,
    }
)


def parse_calendar_method(value: str | None) -> CalendarSelection:
    """Resolve a user supplied alias; unknown or empty input selects ``standar``."""

    if not value:
        return STANDAR_SELECTION
    return METHOD_ALIASES.get(value.strip().lower(), STANDAR_SELECTION)


__all__ = [
    "CIVIL_SELECTION",
    "HIJRI_CALENDARS",
    "METHOD_ALIASES",
    "STANDAR_SELECTION",
    "UMALQURA_SELECTION",
    "CalendarMethod",
    "CalendarSelection",
    "CalendarSystem",
    "parse_calendar_method",
]
