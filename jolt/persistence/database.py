"""Engine and session factory for the PostgreSQL identity store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from jolt.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Connect, pool checkout and statement timeouts are bounded so that an
    unreachable store surfaces as ``store_unavailable`` within seconds
    instead of hanging the request.

    Args:
        settings: Application settings with database URL and pool limits
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
        connect_args={
            "timeout": database.connect_timeout,
            "command_timeout": database.command_timeout,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for one session per request.

    Repositories issue Core statements and flush explicitly, so autoflush
    stays off. Entities are rebuilt from rows, so nothing needs
    refreshing after commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
