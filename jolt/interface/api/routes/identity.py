"""Identity routes: anonymous registration, login and handles."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from jolt.application.usecase.identity import (
    CheckHandleUseCase,
    GetCurrentIdentityUseCase,
    IdentityInfo,
    LoginResponse,
    LoginWithBackupCodeUseCase,
    LoginWithProviderUseCase,
    LoginWithSecretKeyUseCase,
    RegisterAnonymousUseCase,
    RotateSecretKeyUseCase,
    SuggestHandleUseCase,
)
from jolt.application.usecase.identity.check_handle import (
    CheckHandleRequest,
    CheckHandleResponse,
    SuggestHandleResponse,
)
from jolt.application.usecase.identity.get_current_identity import (
    GetCurrentIdentityRequest,
)
from jolt.application.usecase.identity.login_backup_code import (
    LoginWithBackupCodeRequest,
)
from jolt.application.usecase.identity.login_provider import LoginWithProviderRequest
from jolt.application.usecase.identity.login_secret_key import (
    LoginWithSecretKeyRequest,
)
from jolt.application.usecase.identity.register_anonymous import (
    RegisterAnonymousRequest,
    RegisterAnonymousResponse,
)
from jolt.application.usecase.identity.rotate_secret_key import (
    RotateSecretKeyRequest,
    RotateSecretKeyResponse,
)
from jolt.config import Settings
from jolt.domain.error import UnauthenticatedError
from jolt.interface.api.deps import CurrentIdentity
from jolt.interface.api.routes.session import clear_auth_cookie, set_auth_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/identity", tags=["identity"], route_class=DishkaRoute)


class RotateSecretKeyAPIRequest(BaseModel):
    """API request for rotating the caller's secret key."""

    current_secret_key: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class IdentityStatusResponse(BaseModel):
    """Authentication status of the caller."""

    authenticated: bool
    identity: IdentityInfo | None = None


@router.post(
    "/anonymous",
    response_model=RegisterAnonymousResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_anonymous(
    request: RegisterAnonymousRequest,
    response: Response,
    register_anonymous_use_case: FromDishka[RegisterAnonymousUseCase],
    settings: FromDishka[Settings],
) -> RegisterAnonymousResponse:
    """Create an anonymous identity.

    The secret key in the response is shown exactly once.

    Example:
        POST /identity/anonymous
        {"handle": "SwiftTiger42", "region": "north"}

        Response (201):
        {
            "identity": {"identity_id": "...", "handle": "SwiftTiger42", "kind": "anonymous", ...},
            "secret_key": "q0W8...",
            "token": "eyJ..."
        }
    """
    result = await register_anonymous_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    logger.info(f"Anonymous identity registered: {result.identity.handle}")
    return result


@router.post("/login", response_model=LoginResponse)
async def login_with_secret_key(
    request: LoginWithSecretKeyRequest,
    response: Response,
    login_use_case: FromDishka[LoginWithSecretKeyUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with handle and secret key.

    Unknown handle and wrong key both answer 401 invalid_credentials.
    """
    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login/backup-code", response_model=LoginResponse)
async def login_with_backup_code(
    request: LoginWithBackupCodeRequest,
    response: Response,
    login_use_case: FromDishka[LoginWithBackupCodeUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Recover access with a backup code (the code is consumed)."""
    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login/provider", response_model=LoginResponse)
async def login_with_provider(
    request: LoginWithProviderRequest,
    response: Response,
    login_use_case: FromDishka[LoginWithProviderUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log a registered identity in with a provider assertion."""
    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout by clearing the session cookie."""
    clear_auth_cookie(response)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=IdentityStatusResponse)
async def get_me(
    get_current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> IdentityStatusResponse:
    """Get the caller's identity, or an unauthenticated status.

    Safe to call without a session: answers ``authenticated=false``
    instead of 401.
    """
    if not auth_token:
        return IdentityStatusResponse(authenticated=False)

    try:
        identity = await get_current_identity_use_case.execute(
            GetCurrentIdentityRequest(token=auth_token)
        )
    except UnauthenticatedError:
        return IdentityStatusResponse(authenticated=False)

    return IdentityStatusResponse(
        authenticated=True, identity=IdentityInfo.from_identity(identity)
    )


@router.get("/handles/suggestion", response_model=SuggestHandleResponse)
async def suggest_handle(
    suggest_handle_use_case: FromDishka[SuggestHandleUseCase],
) -> SuggestHandleResponse:
    """Suggest a random handle such as ``SwiftTiger42``."""
    return await suggest_handle_use_case.execute()


@router.get("/handles/{handle}/availability", response_model=CheckHandleResponse)
async def check_handle(
    handle: str,
    check_handle_use_case: FromDishka[CheckHandleUseCase],
) -> CheckHandleResponse:
    """Check whether a handle is free (advisory, case-insensitive)."""
    return await check_handle_use_case.execute(CheckHandleRequest(handle=handle))


@router.post("/secret-key/rotate", response_model=RotateSecretKeyResponse)
async def rotate_secret_key(
    request: RotateSecretKeyAPIRequest,
    identity: CurrentIdentity,
    rotate_secret_key_use_case: FromDishka[RotateSecretKeyUseCase],
) -> RotateSecretKeyResponse:
    """Replace the caller's secret key; the new key is shown once."""
    return await rotate_secret_key_use_case.execute(
        RotateSecretKeyRequest(
            identity_id=str(identity.id),
            current_secret_key=request.current_secret_key,
        )
    )
