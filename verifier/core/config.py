from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from verifier.core.errors import InvalidSettingsError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "verifier"
    environment: str = "local"
    log_level: str = "INFO"

    # Bind address for `python -m verifier`
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, ge=1, le=65535, description="Server bind port")

    health_path: str = Field(default="/healthz", description="Liveness endpoint path")

    @field_validator("health_path")
    @classmethod
    def validate_health_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("Health path must start with '/'.")
        return value


def validate_settings() -> Settings:
    """Load settings, translating validation failures into InvalidSettingsError.

    Raises:
        InvalidSettingsError: If any environment variable holds an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        invalid_fields: list[tuple[str, str]] = []
        for error in e.errors():
            field_path = ".".join(str(part) for part in error.get("loc", []))
            message = error.get("msg", "Invalid value")
            invalid_fields.append((field_path.upper() or "UNKNOWN", message))
        raise InvalidSettingsError(invalid_fields) from e


# Validate settings at import time.
# Exceptions will propagate to the importing module (e.g., verifier/main.py)
settings = validate_settings()
