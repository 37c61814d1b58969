"""Shared logging helpers for API Muslim."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Final
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from pathlib import Path

ACCESS_LOGGER_NAME: Final[str] = "apimuslim.access"
LOG_FILE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(\d{4})(\d{2})(\d{2})\.log$")

log = logging.getLogger(__name__)


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for server output. Pass ``force=True``
    to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


class DailyFileHandler(logging.Handler):
    """Append each record to ``<log_dir>/YYYYMMDD.log`` named after its local date."""

    def __init__(self, log_dir: Path, *, time_zone: str) -> None:
        super().__init__()
        self.log_dir = log_dir
        self.time_zone = ZoneInfo(time_zone)
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def filename_for(self, created: float) -> Path:
        stamp = datetime.fromtimestamp(created, tz=self.time_zone)
        return self.log_dir / f"{stamp:%Y%m%d}.log"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            with self.filename_for(record.created).open("a", encoding="utf-8") as handle:
                handle.write(f"{line}\n")
        except Exception:  # noqa: BLE001
            self.handleError(record)


def cleanup_expired_logs(
    log_dir: Path,
    *,
    retention_days: int,
    now: datetime | None = None,
) -> list[Path]:
    """Delete daily log files older than ``retention_days`` and return them."""

    if not log_dir.is_dir():
        return []
    reference = now or datetime.now(UTC)
    retention = timedelta(days=retention_days)
    removed: list[Path] = []
    for entry in sorted(log_dir.iterdir()):
        match = LOG_FILE_PATTERN.match(entry.name)
        if match is None or not entry.is_file():
            continue
        year, month, day = (int(part) for part in match.groups())
        try:
            stamp = datetime(year, month, day, tzinfo=UTC)
        except ValueError:
            continue
        if reference - stamp <= retention:
            continue
        try:
            entry.unlink()
        except OSError:
            log.warning("Failed to delete expired log %s", entry.name, exc_info=True)
            continue
        removed.append(entry)
    return removed


def configure_access_log(
    *,
    verbose: bool,
    log_dir: Path | None = None,
    time_zone: str = "UTC",
) -> logging.Logger:
    """Prepare the access logger.

    Access lines reach the root handlers only when ``verbose`` is set; a
    ``log_dir`` additionally writes them to daily files.
    """

    access_log = logging.getLogger(ACCESS_LOGGER_NAME)
    for handler in list(access_log.handlers):
        if isinstance(handler, DailyFileHandler):
            access_log.removeHandler(handler)
            handler.close()
    access_log.setLevel(logging.INFO)
    access_log.propagate = verbose
    if log_dir is not None:
        access_log.addHandler(DailyFileHandler(log_dir, time_zone=time_zone))
    return access_log


__all__ = [
    "ACCESS_LOGGER_NAME",
    "DailyFileHandler",
    "cleanup_expired_logs",
    "configure_access_log",
    "configure_logging",
]
