"""Mock persistence providers for testing."""

from dishka import Scope, provide

from jolt.domain.repository import (
    BackupCodeRepository,
    IdentityRepository,
    MigrationRecordRepository,
)
from jolt.persistence.repository.inmemory import (
    InMemoryBackupCodeRepository,
    InMemoryIdentityRepository,
    InMemoryMigrationRecordRepository,
)
from jolt.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope: the store outlives single HTTP requests, like a database.
    Every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_repository(self) -> IdentityRepository:
        """Provide in-memory identity repository."""
        return InMemoryIdentityRepository()

    @provide(scope=Scope.APP)
    def get_backup_code_repository(self) -> BackupCodeRepository:
        """Provide in-memory backup code repository."""
        return InMemoryBackupCodeRepository()

    @provide(scope=Scope.APP)
    def get_migration_record_repository(self) -> MigrationRecordRepository:
        """Provide in-memory migration record repository."""
        return InMemoryMigrationRecordRepository()
