"""Export account data use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.backup_code.common import BackupCodeStatus
from jolt.application.usecase.base import BaseUseCase
from jolt.application.usecase.identity.common import IdentityInfo
from jolt.domain.service import SensitiveActionService
from jolt.domain.value import IdentityId


class ExportDataRequest(BaseModel):
    """Export data request."""

    identity_id: str
    backup_code: str


class MigrationRecordInfo(BaseModel):
    """Exported migration audit entry."""

    external_provider_ref: str
    outcome: str
    migrated_at: datetime


class ExportDataResponse(BaseModel):
    """Export document. Contains no hashes and no plaintext codes."""

    identity: IdentityInfo
    external_provider_ref: str | None
    backup_codes: list[BackupCodeStatus]
    migration_records: list[MigrationRecordInfo]
    exported_at: datetime


class ExportDataUseCase(BaseUseCase[ExportDataRequest, ExportDataResponse]):
    """Use case for exporting everything stored about the caller."""

    def __init__(self, sensitive_action_service: SensitiveActionService) -> None:
        self.sensitive_action_service = sensitive_action_service

    async def execute(self, request: ExportDataRequest) -> ExportDataResponse:
        """Consume a backup code, then export.

        Raises:
            InvalidBackupCodeError: If the code fails
        """
        export = await self.sensitive_action_service.export_data(
            IdentityId(UUID(request.identity_id)), request.backup_code
        )
        ref = export.identity.external_provider_ref
        return ExportDataResponse(
            identity=IdentityInfo.from_identity(export.identity),
            external_provider_ref=ref.root if ref else None,
            backup_codes=[
                BackupCodeStatus.from_backup_code(code) for code in export.backup_codes
            ],
            migration_records=[
                MigrationRecordInfo(
                    external_provider_ref=record.external_provider_ref.root,
                    outcome=record.outcome.value,
                    migrated_at=record.migrated_at,
                )
                for record in export.migration_records
            ],
            exported_at=export.exported_at,
        )
