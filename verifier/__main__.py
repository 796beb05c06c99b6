"""Run the verifier service under uvicorn."""

from __future__ import annotations

import logging

import uvicorn
from uvicorn.config import LOG_LEVELS

from verifier.core.bootstrap import settings
from verifier.core.logging import configure_logging

logger = logging.getLogger(__name__)


def uvicorn_log_level(level_name: str) -> str:
    """Map a logging level name to one uvicorn accepts, falling back to info."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    name = str(logging.getLevelName(level)).lower()
    return name if name in LOG_LEVELS else "info"


def main() -> None:
    configure_logging()
    logger.info("Starting %s on %s:%d", settings.app_name, settings.host, settings.port)
    uvicorn.run(
        "verifier.main:app",
        host=settings.host,
        port=settings.port,
        log_level=uvicorn_log_level(settings.log_level),
    )


if __name__ == "__main__":
    main()
