"""Health check route."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from apimuslim.api.dependencies import ApiContext, get_context
from apimuslim.api.responses import success

router = APIRouter(tags=["Tools"])

Context = Annotated[ApiContext, Depends(get_context)]


@router.get("/health", summary="Health Check")
def health(context: Context) -> dict[str, object]:
    return success(
        {
            "serverTime": context.clock().isoformat(),
            "startedAt": context.started_at.isoformat(),
            "uptimeSeconds": context.uptime_seconds(),
            "env": context.config.env,
            "timezone": context.config.timezone,
            "version": context.config.version,
        },
        message="ok",
    )
