"""Client IP detection and uptime formatting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

HEADER_PRIORITY: Final[tuple[str, ...]] = (
    "cf-connecting-ip",
    "true-client-ip",
    "x-client-ip",
    "x-real-ip",
    "x-forwarded-for",
)
REMOTE_ADDR_SOURCE: Final[str] = "remote-addr"
JUST_STARTED_TEXT: Final[str] = "baru saja menyala"


@dataclass(frozen=True, slots=True)
class IpDetail:
    ip: str
    source: str


@dataclass(frozen=True, slots=True)
class IpDetection:
    ip: str
    source: str
    details: tuple[IpDetail, ...] = field(default_factory=tuple)


def resolve_client_ip(
    header: Callable[[str], str | None],
    remote_addr: str | None = None,
) -> IpDetection | None:
    """Pick the client IP from proxy headers in priority order, then the peer address.

    ``x-forwarded-for`` contributes only its first hop. Every usable candidate is
    kept in ``details``.
    """

    details: list[IpDetail] = []
    for name in HEADER_PRIORITY:
        value = header(name)
        if not value:
            continue
        first = value.split(",")[0].strip() if name == "x-forwarded-for" else value.strip()
        if first:
            details.append(IpDetail(ip=first, source=name))
    if remote_addr:
        details.append(IpDetail(ip=remote_addr, source=REMOTE_ADDR_SOURCE))
    if not details:
        return None
    primary = details[0]
    return IpDetection(ip=primary.ip, source=primary.source, details=tuple(details))


def forwarded_ip(header: Callable[[str], str | None], remote_addr: str | None) -> str:
    """Address used for access logs and hit stats: forwarding headers, then the peer."""

    forwarded = header("x-forwarded-for") or header("x-real-ip")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return remote_addr or "unknown"


@dataclass(frozen=True, slots=True)
class UptimeBreakdown:
    days: int
    hours: int
    minutes: int
    seconds: int


def breakdown_uptime(seconds: float) -> UptimeBreakdown:
    total = max(0, int(seconds))
    return UptimeBreakdown(
        days=total // 86_400,
        hours=(total % 86_400) // 3_600,
        minutes=(total % 3_600) // 60,
        seconds=total % 60,
    )


def format_uptime(breakdown: UptimeBreakdown) -> str:
    segments = (
        (breakdown.days, "hari"),
        (breakdown.hours, "jam"),
        (breakdown.minutes, "menit"),
        (breakdown.seconds, "detik"),
    )
    parts = [f"{value} {label}" for value, label in segments if value > 0]
    if not parts:
        return JUST_STARTED_TEXT
    return ", ".join(parts)


__all__ = [
    "HEADER_PRIORITY",
    "IpDetail",
    "IpDetection",
    "UptimeBreakdown",
    "breakdown_uptime",
    "format_uptime",
    "forwarded_ip",
    "resolve_client_ip",
]
