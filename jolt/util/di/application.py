"""Application layer DI providers."""

from dishka import Scope, provide

from jolt.application.usecase.account import DeleteAccountUseCase, ExportDataUseCase
from jolt.application.usecase.backup_code import (
    GenerateBackupCodesUseCase,
    GetBackupCodesUseCase,
    VerifyBackupCodeUseCase,
)
from jolt.application.usecase.identity import (
    CheckHandleUseCase,
    GetCurrentIdentityUseCase,
    LoginWithBackupCodeUseCase,
    LoginWithProviderUseCase,
    LoginWithSecretKeyUseCase,
    RegisterAnonymousUseCase,
    RotateSecretKeyUseCase,
    SuggestHandleUseCase,
)
from jolt.application.usecase.migration import MigrateIdentityUseCase
from jolt.config import AuthSettings
from jolt.domain.service import (
    BackupCodeService,
    IdentityService,
    JWTService,
    MigrationService,
    ProviderAdapter,
    SensitiveActionService,
)
from jolt.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Identity use cases
    @provide(scope=Scope.REQUEST)
    def get_register_anonymous_use_case(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> RegisterAnonymousUseCase:
        """Provide register anonymous use case."""
        return RegisterAnonymousUseCase(
            identity_service=identity_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_with_secret_key_use_case(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> LoginWithSecretKeyUseCase:
        """Provide secret key login use case."""
        return LoginWithSecretKeyUseCase(
            identity_service=identity_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_with_backup_code_use_case(
        self, backup_code_service: BackupCodeService, jwt_service: JWTService
    ) -> LoginWithBackupCodeUseCase:
        """Provide backup code login use case."""
        return LoginWithBackupCodeUseCase(
            backup_code_service=backup_code_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_with_provider_use_case(
        self,
        provider_adapter: ProviderAdapter,
        identity_service: IdentityService,
        jwt_service: JWTService,
    ) -> LoginWithProviderUseCase:
        """Provide provider login use case."""
        return LoginWithProviderUseCase(
            provider_adapter=provider_adapter,
            identity_service=identity_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_check_handle_use_case(
        self, identity_service: IdentityService
    ) -> CheckHandleUseCase:
        """Provide check handle use case."""
        return CheckHandleUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_suggest_handle_use_case(
        self, identity_service: IdentityService
    ) -> SuggestHandleUseCase:
        """Provide suggest handle use case."""
        return SuggestHandleUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_rotate_secret_key_use_case(
        self, identity_service: IdentityService
    ) -> RotateSecretKeyUseCase:
        """Provide secret key rotation use case."""
        return RotateSecretKeyUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_current_identity_use_case(
        self, jwt_service: JWTService, identity_service: IdentityService
    ) -> GetCurrentIdentityUseCase:
        """Provide get current identity use case."""
        return GetCurrentIdentityUseCase(
            jwt_service=jwt_service, identity_service=identity_service
        )

    # Backup code use cases
    @provide(scope=Scope.REQUEST)
    def get_generate_backup_codes_use_case(
        self, backup_code_service: BackupCodeService
    ) -> GenerateBackupCodesUseCase:
        """Provide generate backup codes use case."""
        return GenerateBackupCodesUseCase(backup_code_service=backup_code_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_backup_code_use_case(
        self, backup_code_service: BackupCodeService
    ) -> VerifyBackupCodeUseCase:
        """Provide verify backup code use case."""
        return VerifyBackupCodeUseCase(backup_code_service=backup_code_service)

    @provide(scope=Scope.REQUEST)
    def get_get_backup_codes_use_case(
        self, backup_code_service: BackupCodeService, auth_settings: AuthSettings
    ) -> GetBackupCodesUseCase:
        """Provide backup code status use case."""
        return GetBackupCodesUseCase(
            backup_code_service=backup_code_service, auth_settings=auth_settings
        )

    # Migration use cases
    @provide(scope=Scope.REQUEST)
    def get_migrate_identity_use_case(
        self,
        provider_adapter: ProviderAdapter,
        migration_service: MigrationService,
        jwt_service: JWTService,
    ) -> MigrateIdentityUseCase:
        """Provide migrate identity use case."""
        return MigrateIdentityUseCase(
            provider_adapter=provider_adapter,
            migration_service=migration_service,
            jwt_service=jwt_service,
        )

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_export_data_use_case(
        self, sensitive_action_service: SensitiveActionService
    ) -> ExportDataUseCase:
        """Provide export data use case."""
        return ExportDataUseCase(sensitive_action_service=sensitive_action_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, sensitive_action_service: SensitiveActionService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(sensitive_action_service=sensitive_action_service)
