"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apimuslim.domain.calendar.errors import CalendarError
from apimuslim.domain.sholat.imsakiyah import RamadanScheduleNotFoundError
from apimuslim.domain.sholat.locations import KeywordError

from .middleware import access_log_middleware, stats_middleware
from .responses import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    ROUTE_NOT_FOUND_MESSAGE,
    ApiError,
    error_response,
)
from .routes import ROUTERS

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable
    from contextlib import AbstractAsyncContextManager

    from fastapi.responses import JSONResponse

    from .dependencies import ApiContext

log = getLogger(__name__)

DESCRIPTION = (
    "API jadwal sholat, imsakiyah dan kalender Hijriah/Masehi untuk wilayah Indonesia."
)


async def _api_error(_request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


async def _bad_request(_request: Request, exc: Exception) -> JSONResponse:
    return error_response(str(exc), 400)


async def _not_found(_request: Request, exc: Exception) -> JSONResponse:
    return error_response(str(exc), 404)


async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return error_response(ROUTE_NOT_FOUND_MESSAGE, 404)
    return error_response(str(exc.detail), exc.status_code)


async def _validation_error(_request: Request, exc: Exception) -> JSONResponse:
    log.debug("Rejected request: %s", exc)
    return error_response(INVALID_REQUEST_MESSAGE, 400)


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    log.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(INTERNAL_ERROR_MESSAGE, 500)


def _lifespan(context: ApiContext) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "API Muslim %s ready on %s (%s)",
            context.config.version,
            context.config.base_url,
            context.config.env,
        )
        try:
            yield
        finally:
            if context.geocoder is not None:
                await context.geocoder.aclose()

    return lifespan


def create_app(context: ApiContext) -> FastAPI:
    """Build the HTTP application around an assembled ``ApiContext``."""

    config = context.config
    app = FastAPI(
        title="API Muslim",
        version=config.version,
        description=DESCRIPTION,
        docs_url=None,
        redoc_url="/doc",
        openapi_url="/doc/apimuslim",
        servers=[{"url": config.base_url}],
        lifespan=_lifespan(context),
    )
    app.state.context = context

    app.add_exception_handler(ApiError, _api_error)
    app.add_exception_handler(CalendarError, _bad_request)
    app.add_exception_handler(KeywordError, _bad_request)
    app.add_exception_handler(RamadanScheduleNotFoundError, _not_found)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled)

    for router in ROUTERS:
        app.include_router(router)

    # the middleware added last is the outermost
    if context.stats is not None:
        app.middleware("http")(stats_middleware(context.stats))
    app.middleware("http")(access_log_middleware(config.timezone))
    return app


__all__ = ["create_app"]
