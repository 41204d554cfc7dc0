"""Backup code status view use case."""

from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.config import AuthSettings
from jolt.domain.service import BackupCodeService
from jolt.domain.value import IdentityId

from .common import BackupCodeStatus


class GetBackupCodesRequest(BaseModel):
    """Get backup codes request."""

    identity_id: str


class GetBackupCodesResponse(BaseModel):
    """Backup code status of an identity."""

    generated: bool
    total: int
    remaining: int
    codes: list[BackupCodeStatus]


class GetBackupCodesUseCase(BaseUseCase[GetBackupCodesRequest, GetBackupCodesResponse]):
    """Use case for showing which backup codes are still usable."""

    def __init__(
        self, backup_code_service: BackupCodeService, auth_settings: AuthSettings
    ) -> None:
        self.backup_code_service = backup_code_service
        self.auth_settings = auth_settings

    async def execute(self, request: GetBackupCodesRequest) -> GetBackupCodesResponse:
        codes = await self.backup_code_service.list_codes(
            IdentityId(UUID(request.identity_id))
        )
        include_code = self.auth_settings.retain_backup_code_display
        return GetBackupCodesResponse(
            generated=bool(codes),
            total=len(codes),
            remaining=sum(1 for code in codes if not code.consumed),
            codes=[
                BackupCodeStatus.from_backup_code(code, include_code=include_code)
                for code in codes
            ],
        )
