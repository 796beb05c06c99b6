from __future__ import annotations

from fastapi import APIRouter

from verifier.api.health_api import HEALTH_RESPONSES, REJECTED_METHODS, health_check


def build_router(health_path: str) -> APIRouter:
    """Build the API router with the liveness handler mounted at ``health_path``."""
    router = APIRouter()
    router.add_api_route(
        health_path,
        health_check,
        methods=["GET"],
        tags=["meta"],
        summary="Liveness check",
        response_model=None,
        responses=HEALTH_RESPONSES,
    )
    router.add_api_route(
        health_path,
        health_check,
        methods=REJECTED_METHODS,
        response_model=None,
        include_in_schema=False,
    )
    return router
