"""Identity store providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from jolt.config import Settings
from jolt.domain.repository import (
    BackupCodeRepository,
    IdentityRepository,
    MigrationRecordRepository,
)
from jolt.persistence.database import create_engine, create_session_factory
from jolt.persistence.repository import (
    PostgresBackupCodeRepository,
    PostgresIdentityRepository,
    PostgresMigrationRecordRepository,
)
from jolt.util.di.base import ProviderBase
from jolt.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where identities, backup codes and migration records live."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one session per request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Errors already turned into HTTP responses do not reach this scope, so
        their session still commits. Every write that can fail on a
        constraint runs in a savepoint, which leaves nothing half-done.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=type(e).__name__)
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def identities(self, session: AsyncSession) -> IdentityRepository:
        return PostgresIdentityRepository(session)

    @provide(scope=Scope.REQUEST)
    def backup_codes(self, session: AsyncSession) -> BackupCodeRepository:
        return PostgresBackupCodeRepository(session)

    @provide(scope=Scope.REQUEST)
    def migration_records(self, session: AsyncSession) -> MigrationRecordRepository:
        return PostgresMigrationRecordRepository(session)
