"""Sensitive action gate: backup code re-verification before export/delete."""

from dataclasses import dataclass, field
from datetime import datetime

import logfire

from jolt.domain.error import NotFoundError
from jolt.domain.model import BackupCode, Identity, MigrationRecord
from jolt.domain.model.identity import utcnow
from jolt.domain.repository import (
    BackupCodeRepository,
    IdentityRepository,
    MigrationRecordRepository,
)
from jolt.domain.value import IdentityId, SensitiveAction

from .backup_code_service import BackupCodeService
from .base import Service
from .identity_service import IdentityService


@dataclass
class IdentityExport:
    """Everything stored about one identity, as handed to its owner."""

    identity: Identity
    backup_codes: list[BackupCode]
    migration_records: list[MigrationRecord]
    exported_at: datetime = field(default_factory=utcnow)


class SensitiveActionService(Service):
    """Runs destructive or revealing actions only after a fresh backup code."""

    def __init__(
        self,
        backup_code_service: BackupCodeService,
        identity_service: IdentityService,
        identity_repository: IdentityRepository,
        backup_code_repository: BackupCodeRepository,
        migration_record_repository: MigrationRecordRepository,
    ) -> None:
        """Initialize sensitive action service.

        Args:
            backup_code_service: Verifies and consumes the gate code
            identity_service: Identity lookups
            identity_repository: Identity repository
            backup_code_repository: Backup code repository
            migration_record_repository: Migration audit repository
        """
        self.backup_code_service = backup_code_service
        self.identity_service = identity_service
        self.identity_repository = identity_repository
        self.backup_code_repository = backup_code_repository
        self.migration_record_repository = migration_record_repository

    async def export_data(self, identity_id: IdentityId, backup_code: str) -> IdentityExport:
        """Export the identity's data after consuming a backup code.

        Raises:
            InvalidBackupCodeError: If the code fails; nothing is exported
            NotFoundError: If the identity vanished
        """
        with logfire.span(
            "sensitive_action_service.export_data", identity_id=str(identity_id)
        ):
            await self.backup_code_service.verify(
                identity_id, backup_code, SensitiveAction.EXPORT_DATA
            )

            export = IdentityExport(
                identity=await self.identity_service.get_by_id(identity_id),
                backup_codes=await self.backup_code_repository.find_all_for_identity(
                    identity_id
                ),
                migration_records=await self.migration_record_repository.find_by_identity(
                    identity_id
                ),
            )
            logfire.info("Identity data exported", identity_id=str(identity_id))
            return export

    async def delete_account(self, identity_id: IdentityId, backup_code: str) -> None:
        """Hard-delete the identity and everything that depends on it.

        Raises:
            InvalidBackupCodeError: If the code fails; nothing is deleted
            NotFoundError: If the identity vanished
        """
        with logfire.span(
            "sensitive_action_service.delete_account", identity_id=str(identity_id)
        ):
            await self.backup_code_service.verify(
                identity_id, backup_code, SensitiveAction.DELETE_ACCOUNT
            )

            codes = await self.backup_code_repository.delete_all_for_identity(identity_id)
            records = await self.migration_record_repository.delete_all_for_identity(
                identity_id
            )
            if not await self.identity_repository.delete(identity_id):
                raise NotFoundError("Identity", str(identity_id))

            logfire.info(
                "Identity deleted",
                identity_id=str(identity_id),
                backup_codes=codes,
                migration_records=records,
            )
