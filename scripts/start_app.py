#!/usr/bin/env python3
"""Serve the identity API under uvicorn."""

import sys

import logfire
import uvicorn

from jolt.config import Settings, ensure_production_ready
from jolt.util.error import ConfigurationError
from jolt.util.logging import setup_logging
from jolt.util.observability import configure_logfire


def main() -> int:
    """Check configuration, then hand over to uvicorn's app factory."""
    settings = Settings()

    # Before anything else so that refusals below are reported
    configure_logfire(settings)
    setup_logging(settings)

    try:
        ensure_production_ready(settings)
    except ConfigurationError as e:
        logfire.error("Refusing to start identity API", reason=str(e))
        return 1

    logfire.info(
        "Starting identity API",
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "jolt.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Identity API crashed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
