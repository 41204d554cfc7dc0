"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jolt.config import Settings
from jolt.interface.api.routes import (
    account,
    backup_codes,
    health,
    identity,
    migration,
)
from jolt.interface.error import register_error_handlers
from jolt.util.di.container import create_container, setup_di
from jolt.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire must already be configured; start_app and the test conftest
    both do so before building the app.

    Args:
        container: DI container to use; the production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Jolt Identity API",
        description="Anonymous identities, backup codes and account migration for Jolt",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Credentialed requests need an explicit origin list
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type", "Accept"],
        expose_headers=["Retry-After"],
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(identity.router)
    app_instance.include_router(migration.router)
    app_instance.include_router(backup_codes.router)
    app_instance.include_router(account.router)

    return app_instance
