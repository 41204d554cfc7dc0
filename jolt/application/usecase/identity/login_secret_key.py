"""Secret key login use case."""

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import IdentityService, JWTService

from .common import IdentityInfo, LoginResponse


class LoginWithSecretKeyRequest(BaseModel):
    """Secret key login request."""

    handle: str
    secret_key: str


class LoginWithSecretKeyUseCase(BaseUseCase[LoginWithSecretKeyRequest, LoginResponse]):
    """Use case for logging in with handle and secret key."""

    def __init__(self, identity_service: IdentityService, jwt_service: JWTService) -> None:
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginWithSecretKeyRequest) -> LoginResponse:
        """Authenticate and issue a session token.

        Raises:
            InvalidCredentialsError: On unknown handle or wrong key
        """
        identity = await self.identity_service.login_with_secret_key(
            request.handle, request.secret_key
        )
        return LoginResponse(
            identity=IdentityInfo.from_identity(identity),
            token=self.jwt_service.create_token(identity),
        )
