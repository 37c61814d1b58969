"""Tool routes: client IP, geocoding and uptime."""

from __future__ import annotations

from logging import getLogger
from typing import Annotated, Final

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from apimuslim.api.dependencies import ApiContext, get_context
from apimuslim.api.responses import ApiError, success
from apimuslim.config.errors import MissingConfigurationError
from apimuslim.domain.geocoding import GeocodeError, GeocodeQueueFullError
from apimuslim.domain.tools import breakdown_uptime, format_uptime, resolve_client_ip

log = getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["Tools"])

Context = Annotated[ApiContext, Depends(get_context)]

IP_UNKNOWN_MESSAGE: Final[str] = "Tidak dapat menentukan IP."
GEOCODE_UNAVAILABLE_MESSAGE: Final[str] = "Layanan geocode tidak tersedia."
GEOCODE_NOT_FOUND_MESSAGE: Final[str] = "Lokasi tidak ditemukan."
GEOCODE_FAILED_MESSAGE: Final[str] = "Gagal memproses permintaan geocode."
MISSING_KEY_MESSAGE: Final[str] = "MAPSCO_API_KEY tidak tersedia."
QUEUE_FULL_MESSAGE: Final[str] = "Permintaan sedang padat, coba lagi beberapa saat lagi."


class GeocodeRequest(BaseModel):
    query: str = Field(min_length=1, examples=["Masjid Istiqlal Jakarta"])


@router.get("/ip", summary="Deteksi IP")
def client_ip(request: Request) -> dict[str, object]:
    remote = request.client.host if request.client else None
    detection = resolve_client_ip(request.headers.get, remote)
    if detection is None:
        raise ApiError(IP_UNKNOWN_MESSAGE)
    return success(
        {
            "ip": detection.ip,
            "source": detection.source,
            "agent": request.headers.get("user-agent", "unknown"),
        }
    )


@router.post("/geocode", summary="Geocode (maps.co)")
async def geocode(context: Context, body: GeocodeRequest) -> dict[str, object]:
    """Dibatasi 1 request per detik ke maps.co."""

    if context.geocoder is None:
        raise ApiError(GEOCODE_UNAVAILABLE_MESSAGE, status_code=500)
    try:
        place = await context.geocoder.search(body.query.strip())
    except MissingConfigurationError as exc:
        raise ApiError(MISSING_KEY_MESSAGE, status_code=500) from exc
    except GeocodeQueueFullError as exc:
        raise ApiError(QUEUE_FULL_MESSAGE) from exc
    except GeocodeError as exc:
        log.warning("Geocode lookup failed: %s", exc)
        raise ApiError(GEOCODE_FAILED_MESSAGE) from exc
    if place is None:
        raise ApiError(GEOCODE_NOT_FOUND_MESSAGE)
    return success(place.to_payload())


@router.get("/uptime", summary="Uptime server")
def uptime(context: Context) -> dict[str, object]:
    seconds = context.uptime_seconds()
    breakdown = breakdown_uptime(seconds)
    return success(
        {
            "uptimeSeconds": seconds,
            "serverTime": context.clock().isoformat(),
            "startedAt": context.started_at.isoformat(),
            "breakdown": {
                "days": breakdown.days,
                "hours": breakdown.hours,
                "minutes": breakdown.minutes,
                "seconds": breakdown.seconds,
            },
            "humanReadable": format_uptime(breakdown),
        }
    )
