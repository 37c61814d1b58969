"""JSON envelopes shared by every route."""

from __future__ import annotations

from typing import Final

from fastapi.responses import JSONResponse

SUCCESS_MESSAGE: Final[str] = "success"
NOT_FOUND_MESSAGE: Final[str] = "Data tidak ditemukan."
ROUTE_NOT_FOUND_MESSAGE: Final[str] = "Data tidak ditemukan .."
INTERNAL_ERROR_MESSAGE: Final[str] = "internal server error"
INVALID_REQUEST_MESSAGE: Final[str] = "Permintaan tidak valid."


class ApiError(Exception):
    """Raised by handlers to answer with the error envelope."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ApiError):
    def __init__(self, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(message, status_code=404)


def success(data: object, *, message: str = SUCCESS_MESSAGE) -> dict[str, object]:
    return {"status": True, "message": message, "data": data}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"status": False, "message": message}, status_code=status_code)


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "INVALID_REQUEST_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "ROUTE_NOT_FOUND_MESSAGE",
    "ApiError",
    "NotFoundError",
    "error_response",
    "success",
]
