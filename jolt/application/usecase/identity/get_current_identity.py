"""Get current identity use case."""

from uuid import UUID

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.error import NotFoundError, UnauthenticatedError
from jolt.domain.model import Identity
from jolt.domain.service import IdentityService, JWTService
from jolt.domain.value import IdentityId
from jolt.util.jwt import JWTError


class GetCurrentIdentityRequest(BaseModel):
    """Get current identity request."""

    token: str  # JWT token


class GetCurrentIdentityUseCase(BaseUseCase[GetCurrentIdentityRequest, Identity]):
    """Resolves the caller of a request to an Identity.

    This is the boundary other features use to learn who is calling.
    """

    def __init__(self, jwt_service: JWTService, identity_service: IdentityService) -> None:
        """Initialize get current identity use case.

        Args:
            jwt_service: JWT token domain service
            identity_service: Identity domain service
        """
        self.jwt_service = jwt_service
        self.identity_service = identity_service

    async def execute(self, request: GetCurrentIdentityRequest) -> Identity:
        """Verify the session token and load its identity.

        Raises:
            UnauthenticatedError: If the token is invalid, expired or orphaned
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
            identity_id = IdentityId(UUID(payload.identity_id))
        except (JWTError, ValueError):
            raise UnauthenticatedError("Invalid or expired session")

        try:
            return await self.identity_service.get_by_id(identity_id)
        except NotFoundError:
            # Valid token for a deleted identity
            raise UnauthenticatedError("Invalid or expired session")
