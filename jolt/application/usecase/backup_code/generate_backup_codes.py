"""Generate backup codes use case."""

from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import BackupCodeService
from jolt.domain.value import IdentityId


class GenerateBackupCodesRequest(BaseModel):
    """Generate backup codes request."""

    identity_id: str


class GenerateBackupCodesResponse(BaseModel):
    """Generated codes; this is the only time they are returned in plaintext."""

    codes: list[str]


class GenerateBackupCodesUseCase(
    BaseUseCase[GenerateBackupCodesRequest, GenerateBackupCodesResponse]
):
    """Use case for generating the one-time backup code batch."""

    def __init__(self, backup_code_service: BackupCodeService) -> None:
        self.backup_code_service = backup_code_service

    async def execute(
        self, request: GenerateBackupCodesRequest
    ) -> GenerateBackupCodesResponse:
        """Generate the batch.

        Raises:
            BatchAlreadyExistsError: If the identity already has codes
        """
        codes = await self.backup_code_service.generate_batch(
            IdentityId(UUID(request.identity_id))
        )
        return GenerateBackupCodesResponse(codes=codes)
