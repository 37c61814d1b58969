"""Monthly request hit statistics."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Final
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from apimuslim.domain.ports.stats import StatsUnitOfWork

log = getLogger(__name__)

INVALID_YEAR_MESSAGE = "Tahun tidak valid."
LOCAL_ADDRESS: Final[str] = "127.0.0.1"

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class YearlyHitStat:
    tahun: int
    hits: int


@dataclass(frozen=True, slots=True)
class MonthlyHitStat:
    tahun: int
    bulan: int
    hits: int


@dataclass(frozen=True, slots=True)
class YearDetail:
    avg: float
    detail: tuple[MonthlyHitStat, ...]

    def to_payload(self) -> dict[str, object]:
        return {"avg": self.avg, "detail": [asdict(entry) for entry in self.detail]}


def build_year_detail(rows: Sequence[MonthlyHitStat]) -> YearDetail:
    """Average the recorded months only; a year without rows averages to 0."""

    if not rows:
        return YearDetail(avg=0, detail=())
    total = sum(row.hits for row in rows)
    return YearDetail(avg=round(total / len(rows), 2), detail=tuple(rows))


def parse_stats_year(value: str) -> int | None:
    """Read the leading integer of ``value`` the way a lenient path parser would."""

    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StatsService:
    """Record and report monthly hit counters in the server time zone."""

    def __init__(
        self,
        unit_of_work: Callable[[], StatsUnitOfWork],
        *,
        time_zone: str,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._zone = ZoneInfo(time_zone)
        self._clock = clock

    def current_year(self) -> int:
        return self._clock().astimezone(self._zone).year

    def should_record(self, client_ip: str | None) -> bool:
        return client_ip != LOCAL_ADDRESS

    def record_hit(self, stamp: datetime | None = None) -> None:
        local = (stamp or self._clock()).astimezone(self._zone)
        with self._unit_of_work() as uow:
            uow.stats.increment(local.year, local.month)
            uow.commit()

    def yearly(self) -> list[YearlyHitStat]:
        with self._unit_of_work() as uow:
            return uow.stats.yearly_totals()

    def year_detail(self, year: int) -> YearDetail:
        with self._unit_of_work() as uow:
            rows = uow.stats.monthly(year)
        return build_year_detail(rows)


__all__ = [
    "INVALID_YEAR_MESSAGE",
    "MonthlyHitStat",
    "StatsService",
    "YearDetail",
    "YearlyHitStat",
    "build_year_detail",
    "parse_stats_year",
]
