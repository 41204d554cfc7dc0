"""Tracing and structured logs with Logfire.

Services open one span per operation and log outcomes with identifiers
only:

    with logfire.span("backup_code_service.verify", identity_id=str(identity_id)):
        ...
        logfire.info("Backup code consumed", identity_id=str(identity_id), slot=2)

Secret keys, backup codes and their hashes are never span or log
attributes; the scrubbing patterns below are a second line for anything
that slips through.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from jolt.config import Settings

SCRUB_PATTERNS = ["secret_key", "backup_code", "code_hash", "display_code"]


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship to Logfire; without it,
    output stays on the console.
    """
    send = _send_to_logfire(settings)
    logfire.configure(
        service_name="jolt-identity",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request without recording headers or parsed bodies.

    Request bodies carry secret keys and backup codes, and the cookie
    header carries the session token.
    """

    def _request_attributes(request, attributes):
        # "values" and "errors" both echo the submitted body
        return {
            "path": request.url.path,
            "method": request.method,
            "validation_error_count": len(attributes.get("errors") or ()),
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements (parameters are not recorded)."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
