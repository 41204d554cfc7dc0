"""Backup code use cases."""

from .generate_backup_codes import GenerateBackupCodesUseCase
from .get_backup_codes import GetBackupCodesUseCase
from .verify_backup_code import VerifyBackupCodeUseCase

__all__ = [
    "GenerateBackupCodesUseCase",
    "GetBackupCodesUseCase",
    "VerifyBackupCodeUseCase",
]
