"""Domain services."""

from .backup_code_service import BackupCodeService
from .base import Service
from .handle_suggestion import suggest_handle
from .hashing_service import HashingService
from .identity_service import IdentityService, parse_handle
from .jwt_service import JWTService
from .migration_service import MigrationService
from .provider_service import ProviderAdapter
from .secret_generator import SecretGenerator
from .sensitive_action_service import IdentityExport, SensitiveActionService

__all__ = [
    "BackupCodeService",
    "HashingService",
    "IdentityExport",
    "IdentityService",
    "JWTService",
    "MigrationService",
    "ProviderAdapter",
    "SecretGenerator",
    "SensitiveActionService",
    "Service",
    "parse_handle",
    "suggest_handle",
]
