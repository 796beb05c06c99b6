"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from verifier.core import config
from verifier.main import create_app


@pytest.fixture(scope="function")
def app() -> FastAPI:
    """Creates a FastAPI app for synchronous tests (function-scoped)."""
    # Set test environment so unhandled errors go through the app's handlers
    config.settings.environment = "test"

    return create_app()


@pytest.fixture(scope="function")
def http_client(app: FastAPI) -> TestClient:
    """Creates a synchronous http client."""
    return TestClient(app)


@pytest_asyncio.fixture(scope="function")
async def async_http_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Creates an async http client bound to the app over ASGI."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
