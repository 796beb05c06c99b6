"""API response schemas."""

from __future__ import annotations

from verifier.api.schemas.health_response_models import HealthStatus

__all__ = [
    "HealthStatus",
]
