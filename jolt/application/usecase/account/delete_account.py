"""Delete account use case."""

from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import SensitiveActionService
from jolt.domain.value import IdentityId


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    identity_id: str
    backup_code: str


class DeleteAccountUseCase(BaseUseCase[DeleteAccountRequest, None]):
    """Use case for permanently deleting the caller's identity."""

    def __init__(self, sensitive_action_service: SensitiveActionService) -> None:
        self.sensitive_action_service = sensitive_action_service

    async def execute(self, request: DeleteAccountRequest) -> None:
        """Consume a backup code, then delete everything.

        Raises:
            InvalidBackupCodeError: If the code fails; nothing is deleted
        """
        await self.sensitive_action_service.delete_account(
            IdentityId(UUID(request.identity_id)), request.backup_code
        )
