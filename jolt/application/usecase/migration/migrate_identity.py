"""Migrate identity use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from jolt.adapter.error import ProviderError
from jolt.application.usecase.base import BaseUseCase
from jolt.application.usecase.identity.common import IdentityInfo
from jolt.domain.error import InvalidCredentialsError
from jolt.domain.service import JWTService, MigrationService, ProviderAdapter
from jolt.domain.value import IdentityId


class MigrateIdentityRequest(BaseModel):
    """Migrate identity request."""

    identity_id: str
    provider_assertion: str


class MigrateIdentityResponse(BaseModel):
    """Migrate identity response with a token reflecting the new kind."""

    identity: IdentityInfo
    token: str


class MigrateIdentityUseCase(
    BaseUseCase[MigrateIdentityRequest, MigrateIdentityResponse]
):
    """Use case for binding the caller's anonymous identity to a provider."""

    def __init__(
        self,
        provider_adapter: ProviderAdapter,
        migration_service: MigrationService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize migrate identity use case.

        Args:
            provider_adapter: Provider assertion adapter
            migration_service: Migration domain service
            jwt_service: JWT token domain service
        """
        self.provider_adapter = provider_adapter
        self.migration_service = migration_service
        self.jwt_service = jwt_service

    async def execute(self, request: MigrateIdentityRequest) -> MigrateIdentityResponse:
        """Execute migration flow.

        Steps:
        1. Resolve the provider assertion to an external provider reference
        2. Flip the identity to REGISTERED (one conditional write)
        3. Issue a token carrying the new kind

        Raises:
            InvalidCredentialsError: If the assertion cannot be trusted
            MigrationAlreadyCompletedError: If already registered
            ProviderAlreadyLinkedError: If the reference is bound elsewhere
        """
        with logfire.span("migrate_identity.execute", identity_id=request.identity_id):
            try:
                provider_ref = await self.provider_adapter.resolve(
                    request.provider_assertion
                )
            except ProviderError:
                raise InvalidCredentialsError()

            identity = await self.migration_service.migrate(
                IdentityId(UUID(request.identity_id)), provider_ref
            )
            return MigrateIdentityResponse(
                identity=IdentityInfo.from_identity(identity),
                token=self.jwt_service.create_token(identity),
            )
