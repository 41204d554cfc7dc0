"""Backup code routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from jolt.application.usecase.backup_code import (
    GenerateBackupCodesUseCase,
    GetBackupCodesUseCase,
    VerifyBackupCodeUseCase,
)
from jolt.application.usecase.backup_code.generate_backup_codes import (
    GenerateBackupCodesRequest,
    GenerateBackupCodesResponse,
)
from jolt.application.usecase.backup_code.get_backup_codes import (
    GetBackupCodesRequest,
    GetBackupCodesResponse,
)
from jolt.application.usecase.backup_code.verify_backup_code import (
    VerifyBackupCodeRequest,
    VerifyBackupCodeResponse,
)
from jolt.domain.value import SensitiveAction
from jolt.interface.api.deps import CurrentIdentity

router = APIRouter(prefix="/backup-codes", tags=["backup-codes"], route_class=DishkaRoute)


class VerifyBackupCodeAPIRequest(BaseModel):
    """API request for verifying one of the caller's codes."""

    code: str
    action: SensitiveAction = SensitiveAction.VERIFICATION


@router.post(
    "",
    response_model=GenerateBackupCodesResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_backup_codes(
    identity: CurrentIdentity,
    generate_use_case: FromDishka[GenerateBackupCodesUseCase],
) -> GenerateBackupCodesResponse:
    """Generate the caller's one-time batch of 8 backup codes.

    The plaintext codes are in this response only. A second call answers
    409 batch_already_exists.
    """
    return await generate_use_case.execute(
        GenerateBackupCodesRequest(identity_id=str(identity.id))
    )


@router.get("", response_model=GetBackupCodesResponse)
async def get_backup_codes(
    identity: CurrentIdentity,
    get_use_case: FromDishka[GetBackupCodesUseCase],
) -> GetBackupCodesResponse:
    """Show which of the caller's codes are still usable."""
    return await get_use_case.execute(GetBackupCodesRequest(identity_id=str(identity.id)))


@router.post("/verify", response_model=VerifyBackupCodeResponse)
async def verify_backup_code(
    request: VerifyBackupCodeAPIRequest,
    identity: CurrentIdentity,
    verify_use_case: FromDishka[VerifyBackupCodeUseCase],
) -> VerifyBackupCodeResponse:
    """Verify and consume one of the caller's codes."""
    return await verify_use_case.execute(
        VerifyBackupCodeRequest(
            identity_id=str(identity.id), code=request.code, action=request.action
        )
    )
