"""Unit tests for the plain-text exception handlers."""

from __future__ import annotations

import logging

import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from verifier.core.errors import (
    http_exception_handler,
    plain_text_error,
    unhandled_exception_handler,
)


@pytest.fixture
def request_() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


def test_plain_text_error() -> None:
    response = plain_text_error(405, "Method not allowed")

    assert response.status_code == 405
    assert response.body == b"Method not allowed"
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


def test_http_exception_handler_uses_detail(request_: Request) -> None:
    exc = StarletteHTTPException(
        status_code=401, detail="Token expired", headers={"WWW-Authenticate": "Bearer"}
    )

    response = http_exception_handler(request_, exc)

    assert response.status_code == 401
    assert response.body == b"Token expired"
    assert response.headers["www-authenticate"] == "Bearer"


def test_http_exception_handler_defaults_to_status_phrase(request_: Request) -> None:
    response = http_exception_handler(request_, StarletteHTTPException(status_code=404))

    assert response.status_code == 404
    assert response.body == b"Not Found"


def test_http_exception_handler_rejects_other_exceptions(request_: Request) -> None:
    response = http_exception_handler(request_, RuntimeError("boom"))

    assert response.status_code == 500
    assert response.body == b"Internal server error"


def test_unhandled_exception_handler_logs(
    request_: Request, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that unexpected errors are logged and answered with a plain 500."""
    with caplog.at_level(logging.ERROR):
        response = unhandled_exception_handler(request_, RuntimeError("boom"))

    assert response.status_code == 500
    assert response.body == b"Internal server error"
    assert "Unhandled exception" in caplog.text


def test_http_exception_handler_method_not_allowed(request_: Request) -> None:
    """Test that router-level 405s use the same body as the liveness handler."""
    exc = StarletteHTTPException(status_code=405, headers={"Allow": "GET"})

    response = http_exception_handler(request_, exc)

    assert response.status_code == 405
    assert response.body == b"Method not allowed"
    assert response.headers["allow"] == "GET"
