"""Domain value objects for Jolt identities."""

from jolt.domain.value.identifiers import (
    BackupCodeId,
    IdentityId,
    MigrationRecordId,
)
from jolt.domain.value.types import (
    BACKUP_CODE_BATCH_SIZE,
    BACKUP_CODE_LENGTH,
    HANDLE_MAX_LENGTH,
    ExternalProviderRef,
    Handle,
    IdentityKind,
    IdentityRole,
    MigrationOutcome,
    SensitiveAction,
    normalize_backup_code,
)

__all__ = [
    # Identifiers
    "IdentityId",
    "BackupCodeId",
    "MigrationRecordId",
    # Types
    "BACKUP_CODE_BATCH_SIZE",
    "BACKUP_CODE_LENGTH",
    "HANDLE_MAX_LENGTH",
    "ExternalProviderRef",
    "Handle",
    "IdentityKind",
    "IdentityRole",
    "MigrationOutcome",
    "SensitiveAction",
    "normalize_backup_code",
]
