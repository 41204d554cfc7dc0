"""Repository interfaces for the identity subsystem.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from jolt.domain.repository.backup_code import BackupCodeRepository
from jolt.domain.repository.identity import IdentityRepository
from jolt.domain.repository.migration_record import MigrationRecordRepository

__all__ = [
    "BackupCodeRepository",
    "IdentityRepository",
    "MigrationRecordRepository",
]
