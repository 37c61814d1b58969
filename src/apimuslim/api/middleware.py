"""HTTP middleware: access log lines and hit statistics."""

from __future__ import annotations

import time
from datetime import UTC, datetime
from logging import INFO, getLogger
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from starlette.concurrency import run_in_threadpool

from apimuslim.common.logging import ACCESS_LOGGER_NAME
from apimuslim.domain.tools import forwarded_ip

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

    from apimuslim.domain.stats import StatsService

    CallNext = Callable[[Request], Awaitable[Response]]

log = getLogger(__name__)
access_log = getLogger(ACCESS_LOGGER_NAME)


def request_ip(request: Request) -> str:
    remote = request.client.host if request.client else None
    return forwarded_ip(request.headers.get, remote)


def format_access_line(
    *,
    stamp: datetime,
    ip: str,
    method: str,
    path: str,
    status: int,
    elapsed_ms: float,
) -> str:
    return f"[{stamp:%Y-%m-%d %H:%M:%S}] {ip} {method} {path} {status} {elapsed_ms:.2f}ms"


def access_log_middleware(
    time_zone: str,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    zone = ZoneInfo(time_zone)

    async def log_access(request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        if access_log.isEnabledFor(INFO) and access_log.hasHandlers():
            access_log.info(
                format_access_line(
                    stamp=datetime.now(UTC).astimezone(zone),
                    ip=request_ip(request),
                    method=request.method,
                    path=request.url.path,
                    status=response.status_code,
                    elapsed_ms=elapsed_ms,
                )
            )
        return response

    return log_access


def stats_middleware(
    stats: StatsService,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    async def record_hit(request: Request, call_next: CallNext) -> Response:
        if stats.should_record(request_ip(request)):
            try:
                await run_in_threadpool(stats.record_hit)
            except Exception:
                log.exception("Failed to store hit statistic")
        return await call_next(request)

    return record_hit


__all__ = [
    "access_log_middleware",
    "format_access_line",
    "request_ip",
    "stats_middleware",
]
