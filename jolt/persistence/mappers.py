"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from jolt.domain.model import BackupCode, Identity, MigrationRecord
from jolt.domain.value import (
    BackupCodeId,
    ExternalProviderRef,
    Handle,
    IdentityId,
    IdentityKind,
    IdentityRole,
    MigrationOutcome,
    MigrationRecordId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Convert database row to Identity domain model.

    Args:
        row: Database row as dict

    Returns:
        Identity domain model
    """
    ref = row.get("external_provider_ref")
    return Identity(
        id=IdentityId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        kind=IdentityKind(row["kind"]),
        role=IdentityRole(row["role"]),
        region=row.get("region"),
        external_provider_ref=ExternalProviderRef(ref) if ref else None,
        secret_key_hash=row.get("secret_key_hash"),
        points=row["points"],
        level=row["level"],
        switch_count=row["switch_count"],
        created_at=row["created_at"],
        last_auth_at=row.get("last_auth_at"),
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert Identity domain model to database dict.

    Adds the case-folded ``handle_key`` used for uniqueness.

    Args:
        identity: Identity domain model

    Returns:
        Dict suitable for database insertion
    """
    data = identity.model_dump(mode="python")
    data["kind"] = identity.kind.value
    data["role"] = identity.role.value
    data["handle_key"] = identity.handle.key
    return data


def row_to_backup_code(row: Dict[str, Any]) -> BackupCode:
    """Convert database row to BackupCode domain model."""
    return BackupCode(
        id=BackupCodeId(_uuid(row["id"])),
        identity_id=IdentityId(_uuid(row["identity_id"])),
        slot=row["slot"],
        code_hash=row["code_hash"],
        display_code=row.get("display_code"),
        consumed=row["consumed"],
        consumed_at=row.get("consumed_at"),
        consumed_for=row.get("consumed_for"),
        created_at=row["created_at"],
    )


def backup_code_to_dict(code: BackupCode) -> Dict[str, Any]:
    """Convert BackupCode domain model to database dict."""
    return code.model_dump()


def row_to_migration_record(row: Dict[str, Any]) -> MigrationRecord:
    """Convert database row to MigrationRecord domain model."""
    return MigrationRecord(
        id=MigrationRecordId(_uuid(row["id"])),
        identity_id=IdentityId(_uuid(row["identity_id"])),
        external_provider_ref=ExternalProviderRef(row["external_provider_ref"]),
        outcome=MigrationOutcome(row["outcome"]),
        migrated_at=row["migrated_at"],
    )


def migration_record_to_dict(record: MigrationRecord) -> Dict[str, Any]:
    """Convert MigrationRecord domain model to database dict."""
    data = record.model_dump()
    data["outcome"] = record.outcome.value
    return data
