"""Prayer schedule routes: locations, monthly schedules and imsakiyah."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Final

from fastapi import APIRouter, Depends, Path, Query, Request
from pydantic import BaseModel

from apimuslim.api.dependencies import ApiContext, get_context
from apimuslim.api.responses import ApiError, NotFoundError, success
from apimuslim.domain.calendar.methods import parse_calendar_method
from apimuslim.domain.sholat.locations import normalize_keyword
from apimuslim.domain.sholat.schedules import (
    INVALID_PERIOD_MESSAGE,
    parse_schedule_period,
    select_period,
    today_period,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from apimuslim.domain.sholat.schedules import MonthlySchedule

router = APIRouter(prefix="/sholat", tags=["Sholat"])

Context = Annotated[ApiContext, Depends(get_context)]
YearPath = Annotated[str, Path(pattern=r"^\d{4}$", description="Tahun empat digit")]
MethodQuery = Annotated[
    str | None, Query(description="standar, islamic-umalqura atau islamic-civil")
]

SOURCE_NAME: Final[str] = "bimasislam.kemenag.go.id"

ROUTE_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "/kabkota/semua": ("/kabkota/all", "/kota/semua", "/kota/all"),
    "/kabkota/{id}": ("/kota/{id}",),
    "/kabkota/cari/{keyword}": (
        "/kabkota/find/{keyword}",
        "/kota/cari/{keyword}",
        "/kota/find/{keyword}",
    ),
    "/kabkota/cari": ("/kabkota/find", "/kota/cari", "/kota/find"),
}


class KeywordRequest(BaseModel):
    keyword: str


def _register_aliases(path: str, endpoint: Callable[..., object], method: str) -> None:
    for alias in ROUTE_ALIASES[path]:
        router.add_api_route(alias, endpoint, methods=[method], include_in_schema=False)


def _search(context: ApiContext, keyword: str) -> dict[str, object]:
    needle = normalize_keyword(keyword)
    result = context.locations.search(needle)
    if not result:
        raise NotFoundError
    return success([location.to_payload() for location in result])


def _schedule_payload(schedule: MonthlySchedule) -> dict[str, object]:
    return success(schedule.to_payload())


@router.get("", summary="Informasi Sholat")
def info(context: Context) -> dict[str, object]:
    return success(
        {
            "name": "Jadwal Sholat",
            "desc": "API jadwal Sholat bersumber dari Kementrian Agama Indonesia",
            "lang": "Indonesia",
            "last_update": context.locations.last_update,
            "source": SOURCE_NAME,
        }
    )


@router.get("/kabkota/semua", summary="Semua kabupaten/kota")
def all_locations(context: Context) -> dict[str, object]:
    return success([location.to_payload() for location in context.locations.all()])


_register_aliases("/kabkota/semua", all_locations, "GET")


@router.get("/kabkota/cari/{keyword}", summary="Cari kabupaten/kota")
def search_locations(context: Context, keyword: str) -> dict[str, object]:
    return _search(context, keyword)


_register_aliases("/kabkota/cari/{keyword}", search_locations, "GET")


@router.post("/kabkota/cari", summary="Cari kabupaten/kota (POST)")
def search_locations_post(context: Context, body: KeywordRequest) -> dict[str, object]:
    return _search(context, body.keyword)


async def _search_locations_lenient(request: Request, context: Context) -> dict[str, object]:
    keyword = ""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("keyword"), str):
        keyword = body["keyword"]
    return _search(context, keyword)


_register_aliases("/kabkota/cari", _search_locations_lenient, "POST")


@router.get("/kabkota/{id}", summary="Kabupaten/kota berdasarkan ID")
def location_by_id(context: Context, id: str) -> dict[str, object]:  # noqa: A002
    location = context.locations.find_by_id(id)
    if location is None:
        raise NotFoundError
    return success([location.to_payload()])


_register_aliases("/kabkota/{id}", location_by_id, "GET")


@router.get("/jadwal/{id}/today", summary="Jadwal sholat hari ini")
def schedule_today(
    context: Context,
    id: str,  # noqa: A002
    utc: Annotated[str | None, Query()] = None,
    tz: Annotated[str | None, Query()] = None,
) -> dict[str, object]:
    time_zone = context.calendar.safe_time_zone(utc if utc is not None else tz)
    period = today_period(time_zone, clock=context.clock)
    schedule = context.schedules.load_month(id, period.year, period.month)
    if schedule is None:
        raise NotFoundError
    selected = select_period(schedule, period)
    if selected is None:
        raise NotFoundError
    return _schedule_payload(selected)


@router.get("/jadwal/{id}/{period}", summary="Jadwal sholat bulanan atau harian")
def schedule_for_period(context: Context, id: str, period: str) -> dict[str, object]:  # noqa: A002
    parsed = parse_schedule_period(period)
    if parsed is None:
        raise ApiError(INVALID_PERIOD_MESSAGE)
    schedule = context.schedules.load_month(id, parsed.year, parsed.month)
    if schedule is None:
        raise NotFoundError
    selected = select_period(schedule, parsed)
    if selected is None:
        raise NotFoundError
    return _schedule_payload(selected)


@router.get("/imsakiyah/{id}", summary="Jadwal imsakiyah Ramadhan tahun ini")
def imsakiyah_current(
    context: Context,
    id: str,  # noqa: A002
    method: MethodQuery = None,
) -> dict[str, object]:
    schedule = context.imsakiyah.current(id, parse_calendar_method(method))
    return _schedule_payload(schedule)


@router.get("/imsakiyah/{id}/ce/{year}", summary="Jadwal imsakiyah berdasarkan tahun Masehi")
def imsakiyah_ce(
    context: Context,
    id: str,  # noqa: A002
    year: YearPath,
    method: MethodQuery = None,
) -> dict[str, object]:
    schedule = context.imsakiyah.for_ce_year(id, int(year), parse_calendar_method(method))
    return _schedule_payload(schedule)


@router.get(
    "/imsakiyah/{id}/hijr/{year}", summary="Jadwal imsakiyah berdasarkan tahun Hijriyah"
)
def imsakiyah_hijri(
    context: Context,
    id: str,  # noqa: A002
    year: YearPath,
    method: MethodQuery = None,
) -> dict[str, object]:
    schedule = context.imsakiyah.for_hijri_year(id, int(year), parse_calendar_method(method))
    return _schedule_payload(schedule)
