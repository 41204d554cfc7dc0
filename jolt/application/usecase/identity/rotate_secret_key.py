"""Secret key rotation use case."""

from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import IdentityService
from jolt.domain.value import IdentityId


class RotateSecretKeyRequest(BaseModel):
    """Rotate secret key request."""

    identity_id: str
    current_secret_key: str


class RotateSecretKeyResponse(BaseModel):
    """Rotate secret key response; the new key is shown once."""

    secret_key: str


class RotateSecretKeyUseCase(
    BaseUseCase[RotateSecretKeyRequest, RotateSecretKeyResponse]
):
    """Use case for replacing an identity's secret key."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: RotateSecretKeyRequest) -> RotateSecretKeyResponse:
        """Rotate the key.

        Raises:
            InvalidCredentialsError: If the current key is wrong
        """
        secret_key = await self.identity_service.rotate_secret_key(
            IdentityId(UUID(request.identity_id)), request.current_secret_key
        )
        return RotateSecretKeyResponse(secret_key=secret_key)
