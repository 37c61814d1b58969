"""Ports for persisting request hit counters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from apimuslim.domain.stats import MonthlyHitStat, YearlyHitStat


@runtime_checkable
class HitStatsRepository(Protocol):
    """Monthly hit counters keyed by ``(year, month)``."""

    def increment(self, year: int, month: int) -> None: ...

    def yearly_totals(self) -> list[YearlyHitStat]: ...

    def monthly(self, year: int) -> list[MonthlyHitStat]: ...


@runtime_checkable
class StatsUnitOfWork(Protocol):
    """Transaction boundary around the hit counter repository."""

    @property
    def stats(self) -> HitStatsRepository: ...

    def __enter__(self) -> StatsUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


__all__ = ["HitStatsRepository", "StatsUnitOfWork"]
