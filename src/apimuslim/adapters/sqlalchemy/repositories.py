"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select, update
from sqlalchemy.dialects import postgresql, sqlite

from apimuslim.adapters.sqlalchemy.mappings import stats_table
from apimuslim.domain.stats import MonthlyHitStat, YearlyHitStat

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyHitStatsRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def increment(self, year: int, month: int) -> None:
        dialect = self.session.get_bind().dialect.name
        if dialect == "sqlite":
            insert_stmt = sqlite.insert(stats_table)
        elif dialect == "postgresql":
            insert_stmt = postgresql.insert(stats_table)
        else:
            self._increment_portable(year, month)
            return
        stmt = insert_stmt.values(year=year, month=month, hits=1).on_conflict_do_update(
            index_elements=[stats_table.c.year, stats_table.c.month],
            set_={"hits": stats_table.c.hits + 1},
        )
        self.session.execute(stmt)

    def yearly_totals(self) -> list[YearlyHitStat]:
        hits = func.sum(stats_table.c.hits).label("hits")
        stmt = (
            select(stats_table.c.year, hits)
            .group_by(stats_table.c.year)
            .order_by(stats_table.c.year.desc())
        )
        return [
            YearlyHitStat(tahun=int(row.year), hits=int(row.hits or 0))
            for row in self.session.execute(stmt)
        ]

    def monthly(self, year: int) -> list[MonthlyHitStat]:
        stmt = (
            select(stats_table.c.year, stats_table.c.month, stats_table.c.hits)
            .where(stats_table.c.year == year)
            .order_by(stats_table.c.month.asc())
        )
        return [
            MonthlyHitStat(tahun=int(row.year), bulan=int(row.month), hits=int(row.hits))
            for row in self.session.execute(stmt)
        ]

    def _increment_portable(self, year: int, month: int) -> None:
        stmt = (
            update(stats_table)
            .where(stats_table.c.year == year)
            .where(stats_table.c.month == month)
            .values(hits=stats_table.c.hits + 1)
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            self.session.execute(stats_table.insert().values(year=year, month=month, hits=1))


__all__ = ["SqlAlchemyHitStatsRepository"]
