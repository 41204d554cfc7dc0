"""Backup code login use case."""

from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import BackupCodeService, JWTService

from .common import IdentityInfo, LoginResponse


class LoginWithBackupCodeRequest(BaseModel):
    """Backup code login request."""

    handle: str
    backup_code: str


class LoginWithBackupCodeUseCase(
    BaseUseCase[LoginWithBackupCodeRequest, LoginResponse]
):
    """Use case for recovering access with a backup code.

    The code is consumed; it cannot be used again.
    """

    def __init__(
        self, backup_code_service: BackupCodeService, jwt_service: JWTService
    ) -> None:
        self.backup_code_service = backup_code_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginWithBackupCodeRequest) -> LoginResponse:
        """Authenticate and issue a session token.

        Raises:
            InvalidBackupCodeError: On unknown handle or failed code
        """
        identity = await self.backup_code_service.login_with_backup_code(
            request.handle, request.backup_code
        )
        return LoginResponse(
            identity=IdentityInfo.from_identity(identity),
            token=self.jwt_service.create_token(identity),
        )
