from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import cast

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from verifier.api.router import build_router
from verifier.core.bootstrap import settings
from verifier.core.errors import http_exception_handler, unhandled_exception_handler
from verifier.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()

    try:
        api_version = version("verifier")
    except PackageNotFoundError:
        api_version = "0.1.0"  # Fallback if package not installed
        logger.warning("verifier package not found, using fallback version 0.1.0")

    is_debug_mode = settings.environment == "local"
    app = FastAPI(
        title=settings.app_name,
        version=api_version,
        debug=is_debug_mode,
    )
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
    app.include_router(build_router(settings.health_path))

    logger.info(
        "Created %s %s (environment=%s, health_path=%s)",
        settings.app_name,
        api_version,
        settings.environment,
        settings.health_path,
    )
    return app


app = create_app()
