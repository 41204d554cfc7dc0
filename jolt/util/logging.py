"""Stdlib logging setup for route modules, scripts and uvicorn."""

import logging
import sys

from jolt.config import Settings

# Loggers that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once at process start.

    Application events go through logfire; this covers the plain
    ``logging`` calls in the interface layer and in libraries.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
