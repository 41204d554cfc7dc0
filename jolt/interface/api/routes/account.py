"""Account routes guarded by backup code re-verification."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from jolt.application.usecase.account import DeleteAccountUseCase, ExportDataUseCase
from jolt.application.usecase.account.delete_account import DeleteAccountRequest
from jolt.application.usecase.account.export_data import (
    ExportDataRequest,
    ExportDataResponse,
)
from jolt.interface.api.deps import CurrentIdentity
from jolt.interface.api.routes.session import clear_auth_cookie

router = APIRouter(prefix="/account", tags=["account"], route_class=DishkaRoute)


class BackupCodeAPIRequest(BaseModel):
    """API request carrying a fresh backup code."""

    backup_code: str


@router.post("/export", response_model=ExportDataResponse)
async def export_data(
    request: BackupCodeAPIRequest,
    identity: CurrentIdentity,
    export_use_case: FromDishka[ExportDataUseCase],
) -> ExportDataResponse:
    """Export everything stored about the caller (consumes the code)."""
    return await export_use_case.execute(
        ExportDataRequest(identity_id=str(identity.id), backup_code=request.backup_code)
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    request: BackupCodeAPIRequest,
    identity: CurrentIdentity,
    delete_use_case: FromDishka[DeleteAccountUseCase],
) -> Response:
    """Permanently delete the caller's identity (consumes the code)."""
    await delete_use_case.execute(
        DeleteAccountRequest(identity_id=str(identity.id), backup_code=request.backup_code)
    )
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_auth_cookie(response)
    return response
