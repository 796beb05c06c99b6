"""Response models for the liveness endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(BaseModel):
    """Liveness payload returned on a successful health check."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [{"status": "ok", "message": "Verifier service is healthy"}]
        },
    )

    status: str = Field(..., description="Service status", examples=["ok"])
    message: str = Field(
        ...,
        description="Human-readable status description",
        examples=["Verifier service is healthy"],
    )
