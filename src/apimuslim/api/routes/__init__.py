"""HTTP routers grouped by feature."""

from __future__ import annotations

from . import cal, health, qibla, sholat, stats, tools

ROUTERS = (
    sholat.router,
    cal.router,
    qibla.router,
    tools.router,
    health.router,
    stats.router,
)

__all__ = ["ROUTERS"]
