"""Provider login use case."""

from pydantic import BaseModel

from jolt.adapter.error import ProviderError
from jolt.application.usecase.base import BaseUseCase
from jolt.domain.error import InvalidCredentialsError
from jolt.domain.service import IdentityService, JWTService, ProviderAdapter

from .common import IdentityInfo, LoginResponse


class LoginWithProviderRequest(BaseModel):
    """Provider login request."""

    provider_assertion: str


class LoginWithProviderUseCase(BaseUseCase[LoginWithProviderRequest, LoginResponse]):
    """Use case for logging a registered identity in via its provider."""

    def __init__(
        self,
        provider_adapter: ProviderAdapter,
        identity_service: IdentityService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize provider login use case.

        Args:
            provider_adapter: Provider assertion adapter
            identity_service: Identity domain service
            jwt_service: JWT token domain service
        """
        self.provider_adapter = provider_adapter
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginWithProviderRequest) -> LoginResponse:
        """Resolve the assertion and sign the bound identity in.

        Raises:
            InvalidCredentialsError: If the assertion is invalid or unbound
        """
        try:
            provider_ref = await self.provider_adapter.resolve(request.provider_assertion)
        except ProviderError:
            raise InvalidCredentialsError()

        identity = await self.identity_service.login_with_provider(provider_ref)
        return LoginResponse(
            identity=IdentityInfo.from_identity(identity),
            token=self.jwt_service.create_token(identity),
        )
