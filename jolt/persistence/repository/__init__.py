"""PostgreSQL repository implementations."""

from jolt.persistence.repository.backup_code import PostgresBackupCodeRepository
from jolt.persistence.repository.identity import PostgresIdentityRepository
from jolt.persistence.repository.migration_record import (
    PostgresMigrationRecordRepository,
)

__all__ = [
    "PostgresBackupCodeRepository",
    "PostgresIdentityRepository",
    "PostgresMigrationRecordRepository",
]
