"""Verify backup code use case."""

from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import BackupCodeService
from jolt.domain.value import IdentityId, SensitiveAction


class VerifyBackupCodeRequest(BaseModel):
    """Verify backup code request."""

    identity_id: str
    code: str
    action: SensitiveAction = SensitiveAction.VERIFICATION


class VerifyBackupCodeResponse(BaseModel):
    """Verify backup code response."""

    ok: bool


class VerifyBackupCodeUseCase(
    BaseUseCase[VerifyBackupCodeRequest, VerifyBackupCodeResponse]
):
    """Use case for verifying (and consuming) a backup code."""

    def __init__(self, backup_code_service: BackupCodeService) -> None:
        self.backup_code_service = backup_code_service

    async def execute(self, request: VerifyBackupCodeRequest) -> VerifyBackupCodeResponse:
        """Verify and consume.

        Raises:
            InvalidBackupCodeError: If the code fails for any reason
        """
        ok = await self.backup_code_service.verify(
            IdentityId(UUID(request.identity_id)), request.code, request.action
        )
        return VerifyBackupCodeResponse(ok=ok)
