"""In-memory repository implementations for testing."""

from .backup_code import InMemoryBackupCodeRepository
from .identity import InMemoryIdentityRepository
from .migration_record import InMemoryMigrationRecordRepository

__all__ = [
    "InMemoryBackupCodeRepository",
    "InMemoryIdentityRepository",
    "InMemoryMigrationRecordRepository",
]
