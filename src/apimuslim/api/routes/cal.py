"""Calendar routes: today, Gregorian to Hijri and Hijri to Gregorian."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from apimuslim.api.dependencies import ApiContext, get_context
from apimuslim.api.responses import success
from apimuslim.domain.calendar.service import CalendarRequest

router = APIRouter(prefix="/cal", tags=["Kalender"])

Context = Annotated[ApiContext, Depends(get_context)]
AdjustmentQuery = Annotated[
    str | None, Query(description="Penyesuaian hari (bilangan bulat, boleh negatif)")
]
MethodQuery = Annotated[
    str | None, Query(description="standar, islamic-umalqura atau islamic-civil")
]
ZoneQuery = Annotated[str | None, Query(description="Zona waktu IANA, misal Asia/Jakarta")]


def _calendar_request(
    context: ApiContext,
    *,
    adj: str | None,
    method: str | None,
    m: str | None,
    utc: str | None,
    tz: str | None,
) -> CalendarRequest:
    return context.calendar.build_request(
        method=method if method is not None else m,
        time_zone=utc if utc is not None else tz,
        adjustment=adj,
    )


@router.get("/today", summary="Tanggal hari ini")
def today(
    context: Context,
    adj: AdjustmentQuery = None,
    method: MethodQuery = None,
    m: MethodQuery = None,
    utc: ZoneQuery = None,
    tz: ZoneQuery = None,
) -> dict[str, object]:
    request = _calendar_request(context, adj=adj, method=method, m=m, utc=utc, tz=tz)
    return success(context.calendar.today(request).to_payload())


@router.get("/hijr/{date}", summary="Konversi Masehi ke Hijriyah")
def gregorian_to_hijri(
    context: Context,
    date: Annotated[str, Path(description="Tanggal Masehi YYYY-MM-DD")],
    adj: AdjustmentQuery = None,
    method: MethodQuery = None,
    m: MethodQuery = None,
    utc: ZoneQuery = None,
    tz: ZoneQuery = None,
) -> dict[str, object]:
    request = _calendar_request(context, adj=adj, method=method, m=m, utc=utc, tz=tz)
    return success(context.calendar.gregorian_to_hijri(date, request).to_payload())


@router.get("/ce/{date}", summary="Konversi Hijriyah ke Masehi")
def hijri_to_gregorian(
    context: Context,
    date: Annotated[str, Path(description="Tanggal Hijriyah YYYY-MM-DD")],
    adj: AdjustmentQuery = None,
    method: MethodQuery = None,
    m: MethodQuery = None,
    utc: ZoneQuery = None,
    tz: ZoneQuery = None,
) -> dict[str, object]:
    request = _calendar_request(context, adj=adj, method=method, m=m, utc=utc, tz=tz)
    return success(context.calendar.hijri_to_gregorian(date, request).to_payload())
