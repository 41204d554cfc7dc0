"""Domain layer DI providers."""

from dishka import Scope, provide

from jolt.config import AuthSettings, HashingSettings
from jolt.domain.repository import (
    BackupCodeRepository,
    IdentityRepository,
    MigrationRecordRepository,
)
from jolt.domain.service import (
    BackupCodeService,
    HashingService,
    IdentityService,
    JWTService,
    MigrationService,
    SecretGenerator,
    SensitiveActionService,
)
from jolt.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The stateless generator and hasher live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_secret_generator(self) -> SecretGenerator:
        """Provide secret key and backup code generator."""
        return SecretGenerator()

    @provide(scope=Scope.APP)
    def get_hashing_service(self, hashing_settings: HashingSettings) -> HashingService:
        """Provide argon2id hashing service."""
        return HashingService(hashing_settings=hashing_settings)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self,
        identity_repository: IdentityRepository,
        secret_generator: SecretGenerator,
        hashing_service: HashingService,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_repository=identity_repository,
            secret_generator=secret_generator,
            hashing_service=hashing_service,
        )

    @provide
    def get_backup_code_service(
        self,
        backup_code_repository: BackupCodeRepository,
        identity_repository: IdentityRepository,
        secret_generator: SecretGenerator,
        hashing_service: HashingService,
        auth_settings: AuthSettings,
    ) -> BackupCodeService:
        """Provide backup code lifecycle service."""
        return BackupCodeService(
            backup_code_repository=backup_code_repository,
            identity_repository=identity_repository,
            secret_generator=secret_generator,
            hashing_service=hashing_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_migration_service(
        self,
        identity_repository: IdentityRepository,
        migration_record_repository: MigrationRecordRepository,
    ) -> MigrationService:
        """Provide migration domain service."""
        return MigrationService(
            identity_repository=identity_repository,
            migration_record_repository=migration_record_repository,
        )

    @provide
    def get_sensitive_action_service(
        self,
        backup_code_service: BackupCodeService,
        identity_service: IdentityService,
        identity_repository: IdentityRepository,
        backup_code_repository: BackupCodeRepository,
        migration_record_repository: MigrationRecordRepository,
    ) -> SensitiveActionService:
        """Provide the sensitive action gate."""
        return SensitiveActionService(
            backup_code_service=backup_code_service,
            identity_service=identity_service,
            identity_repository=identity_repository,
            backup_code_repository=backup_code_repository,
            migration_record_repository=migration_record_repository,
        )
