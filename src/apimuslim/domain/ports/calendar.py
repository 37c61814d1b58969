"""Port for the locale and calendar aware date formatter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from apimuslim.domain.calendar.dates import DateParts
    from apimuslim.domain.calendar.methods import CalendarSystem


@runtime_checkable
class CalendarFormatter(Protocol):
    """Projects absolute instants onto a calendar system as observed in a time zone.

    Implementations must be stateless and safe to call from concurrent requests.
    The day-index to date-parts mapping of every Hijri calendar they support must
    be monotonically non-decreasing, otherwise the binary-search converter cannot
    find dates in it.
    """

    def project(
        self, instant: datetime, time_zone: str, calendar: CalendarSystem
    ) -> DateParts: ...

    def display_long(
        self, instant: datetime, time_zone: str, calendar: CalendarSystem
    ) -> str: ...

    def weekday_name(
        self, instant: datetime, time_zone: str, calendar: CalendarSystem
    ) -> str: ...

    def month_name(
        self, instant: datetime, time_zone: str, calendar: CalendarSystem
    ) -> str: ...


__all__ = ["CalendarFormatter"]
