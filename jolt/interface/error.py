"""Interface layer error mapping.

Every expected failure leaves the API as
``{"error": <kind>, "detail": <message>, "retryable": <bool>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jolt.domain.error import DomainError, ErrorKind
from jolt.persistence.error import StoreUnavailableError

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 5

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.HANDLE_TAKEN: status.HTTP_409_CONFLICT,
    ErrorKind.BATCH_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.MIGRATION_ALREADY_COMPLETED: status.HTTP_409_CONFLICT,
    ErrorKind.PROVIDER_ALREADY_LINKED: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_BACKUP_CODE: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(kind: ErrorKind, detail: str) -> dict:
    """Build the error envelope."""
    return {
        "error": kind.value,
        "detail": detail,
        "retryable": kind == ErrorKind.STORE_UNAVAILABLE,
    }


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error into its status and envelope."""
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} -> {exc.kind.value}")
    return JSONResponse(status_code=status_code, content=error_body(exc.kind, str(exc)))


async def store_unavailable_handler(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    """Tell the client the store is down and when to retry."""
    logger.warning(f"{request.method} {request.url.path} -> store unavailable")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=error_body(exc.kind, str(exc)),
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the common envelope."""
    errors = exc.errors()
    detail = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(ErrorKind.VALIDATION, detail),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error handlers to an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
