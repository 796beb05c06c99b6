"""Liveness endpoint."""

from __future__ import annotations

from typing import Any, Final

from fastapi import Request, Response, status
from pydantic_core import PydanticSerializationError

from verifier.api.schemas import HealthStatus
from verifier.core.errors import (
    INTERNAL_ERROR_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    plain_text_error,
)

HEALTHY_STATUS: Final[str] = "ok"
HEALTHY_MESSAGE: Final[str] = "Verifier service is healthy"

# Every other method is routed here too so the handler owns the 405 response.
REJECTED_METHODS: Final[list[str]] = ["HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

HEALTH_RESPONSES: Final[dict[int | str, dict[str, Any]]] = {
    status.HTTP_200_OK: {
        "model": HealthStatus,
        "description": "Service is alive",
    },
    status.HTTP_405_METHOD_NOT_ALLOWED: {
        "description": "Only GET is allowed",
        "content": {"text/plain": {"example": METHOD_NOT_ALLOWED_MESSAGE}},
    },
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "description": "Health payload could not be encoded",
        "content": {"text/plain": {"example": INTERNAL_ERROR_MESSAGE}},
    },
}


def health_check(request: Request) -> Response:
    """Report that the service process is up and responding."""
    if request.method != "GET":
        return plain_text_error(status.HTTP_405_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_MESSAGE)

    health_status = HealthStatus(status=HEALTHY_STATUS, message=HEALTHY_MESSAGE)
    try:
        body = health_status.model_dump_json()
    except PydanticSerializationError:
        return plain_text_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return Response(
        content=body,
        status_code=status.HTTP_200_OK,
        media_type="application/json",
    )
