"""Anonymous to registered migration route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from jolt.application.usecase.migration import MigrateIdentityUseCase
from jolt.application.usecase.migration.migrate_identity import (
    MigrateIdentityRequest,
    MigrateIdentityResponse,
)
from jolt.config import Settings
from jolt.interface.api.deps import CurrentIdentity
from jolt.interface.api.routes.session import set_auth_cookie

router = APIRouter(prefix="/identity", tags=["migration"], route_class=DishkaRoute)


class MigrateIdentityAPIRequest(BaseModel):
    """API request for migrating the caller."""

    provider_assertion: str


@router.post("/migrate", response_model=MigrateIdentityResponse)
async def migrate_identity(
    request: MigrateIdentityAPIRequest,
    response: Response,
    identity: CurrentIdentity,
    migrate_identity_use_case: FromDishka[MigrateIdentityUseCase],
    settings: FromDishka[Settings],
) -> MigrateIdentityResponse:
    """Bind the caller's anonymous identity to an external provider account.

    Progress (points, level, switch count) is kept. The session cookie is
    re-issued so it reflects the new kind.

    Errors:
        409 migration_already_completed, 409 provider_already_linked,
        401 invalid_credentials (untrusted assertion)
    """
    result = await migrate_identity_use_case.execute(
        MigrateIdentityRequest(
            identity_id=str(identity.id),
            provider_assertion=request.provider_assertion,
        )
    )
    set_auth_cookie(response, result.token, settings)
    return result
