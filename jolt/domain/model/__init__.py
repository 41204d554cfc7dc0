"""Domain model entities for Jolt identities."""

from jolt.domain.model.backup_code import BackupCode
from jolt.domain.model.identity import Identity
from jolt.domain.model.migration_record import MigrationRecord

__all__ = [
    "BackupCode",
    "Identity",
    "MigrationRecord",
]
