"""Identity use cases."""

from .check_handle import CheckHandleUseCase, SuggestHandleUseCase
from .common import IdentityInfo, LoginResponse
from .get_current_identity import GetCurrentIdentityUseCase
from .login_backup_code import LoginWithBackupCodeUseCase
from .login_provider import LoginWithProviderUseCase
from .login_secret_key import LoginWithSecretKeyUseCase
from .register_anonymous import RegisterAnonymousUseCase
from .rotate_secret_key import RotateSecretKeyUseCase

__all__ = [
    "CheckHandleUseCase",
    "GetCurrentIdentityUseCase",
    "IdentityInfo",
    "LoginResponse",
    "LoginWithBackupCodeUseCase",
    "LoginWithProviderUseCase",
    "LoginWithSecretKeyUseCase",
    "RegisterAnonymousUseCase",
    "RotateSecretKeyUseCase",
    "SuggestHandleUseCase",
]
