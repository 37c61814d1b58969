"""Hit statistics routes."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Final

from fastapi import APIRouter, Depends

from apimuslim.api.dependencies import ApiContext, get_context
from apimuslim.api.responses import ApiError, success
from apimuslim.domain.stats import INVALID_YEAR_MESSAGE, StatsService, parse_stats_year

router = APIRouter(prefix="/stats", tags=["Stats"])

Context = Annotated[ApiContext, Depends(get_context)]

STATS_DISABLED_MESSAGE: Final[str] = "Statistik tidak tersedia."


def _stats(context: ApiContext) -> StatsService:
    if context.stats is None:
        raise ApiError(STATS_DISABLED_MESSAGE, status_code=500)
    return context.stats


@router.get("", summary="Stats Terkini")
def current_year(context: Context) -> dict[str, object]:
    stats = _stats(context)
    return success(stats.year_detail(stats.current_year()).to_payload())


@router.get("/all", summary="Stats Tahunan")
def all_years(context: Context) -> dict[str, object]:
    return success([asdict(entry) for entry in _stats(context).yearly()])


@router.get("/{year}", summary="Stats Bulanan")
def year_detail(context: Context, year: str) -> dict[str, object]:
    parsed = parse_stats_year(year)
    if parsed is None:
        raise ApiError(INVALID_YEAR_MESSAGE)
    return success(_stats(context).year_detail(parsed).to_payload())
