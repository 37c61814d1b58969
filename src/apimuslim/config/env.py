"""Environment variable loaders for configuration."""

from __future__ import annotations

import math
import os


def optional_env_var(name: str) -> str | None:
    """Return a stripped environment variable, or ``None`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def parse_boolean(value: str | None, *, fallback: bool) -> bool:
    """Only a case-insensitive ``true`` counts as true once a value is present."""

    if value is None:
        return fallback
    return value.strip().lower() == "true"


def parse_positive_int(value: str | None, fallback: int) -> int:
    if value is None:
        return fallback
    try:
        number = float(value)
    except ValueError:
        return fallback
    if not math.isfinite(number):
        return fallback
    normalized = math.floor(number)
    return normalized if normalized > 0 else fallback
