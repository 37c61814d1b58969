"""SQLAlchemy table metadata for the hit statistics store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, Integer, MetaData, PrimaryKeyConstraint, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "pk": "pk_%(table_name)s",
    }
)

stats_table = Table(
    "stats",
    metadata,
    Column("year", Integer, nullable=False),
    Column("month", Integer, nullable=False),
    Column("hits", Integer, nullable=False, server_default="0"),
    PrimaryKeyConstraint("year", "month"),
)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine, checkfirst=True)


__all__ = ["create_all_tables", "metadata", "stats_table"]
