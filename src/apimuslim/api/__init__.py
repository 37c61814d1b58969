"""HTTP surface of API Muslim."""

from __future__ import annotations

from .app import create_app
from .dependencies import ApiContext, get_context

__all__ = ["ApiContext", "create_app", "get_context"]
