from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Final

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_405_METHOD_NOT_ALLOWED, HTTP_500_INTERNAL_SERVER_ERROR

METHOD_NOT_ALLOWED_MESSAGE: Final[str] = "Method not allowed"
INTERNAL_ERROR_MESSAGE: Final[str] = "Internal server error"


class InvalidSettingsError(Exception):
    """Raised when settings are invalid."""

    def __init__(self, invalid_fields: list[tuple[str, str]]) -> None:
        """Initialize with list of invalid field names and messages."""
        self.invalid_fields = invalid_fields
        summary = ", ".join(f"{field}: {message}" for field, message in invalid_fields)
        super().__init__(f"Invalid environment variables: {summary}")


def plain_text_error(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> PlainTextResponse:
    """Build a plain-text error response."""
    return PlainTextResponse(content=message, status_code=status_code, headers=headers)


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def http_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    if not isinstance(exc, StarletteHTTPException):
        return plain_text_error(HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    detail = exc.detail
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        message = METHOD_NOT_ALLOWED_MESSAGE
    else:
        message = str(detail) if detail else _status_phrase(exc.status_code)
    return plain_text_error(
        exc.status_code,
        message,
        headers=getattr(exc, "headers", None),
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logging.exception("Unhandled exception", exc_info=exc)
    return plain_text_error(HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
