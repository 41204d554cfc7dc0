"""Register anonymous identity use case."""

from pydantic import BaseModel, Field

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import IdentityService, JWTService

from .common import IdentityInfo


class RegisterAnonymousRequest(BaseModel):
    """Register anonymous identity request."""

    handle: str
    region: str | None = Field(None, max_length=100)


class RegisterAnonymousResponse(BaseModel):
    """Register anonymous identity response.

    ``secret_key`` is shown exactly once; the service keeps only its hash.
    """

    identity: IdentityInfo
    secret_key: str
    token: str


class RegisterAnonymousUseCase(
    BaseUseCase[RegisterAnonymousRequest, RegisterAnonymousResponse]
):
    """Use case for creating an anonymous identity."""

    def __init__(self, identity_service: IdentityService, jwt_service: JWTService) -> None:
        """Initialize register anonymous use case.

        Args:
            identity_service: Identity domain service
            jwt_service: JWT token domain service
        """
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterAnonymousRequest) -> RegisterAnonymousResponse:
        """Create the identity and sign it in.

        Raises:
            ValidationError: If the handle is malformed
            HandleTakenError: If the handle is already used
        """
        identity, secret_key = await self.identity_service.create_anonymous(
            request.handle, region=request.region
        )
        return RegisterAnonymousResponse(
            identity=IdentityInfo.from_identity(identity),
            secret_key=secret_key,
            token=self.jwt_service.create_token(identity),
        )
