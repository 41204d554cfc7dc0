"""Request-level identity resolution for routes and downstream features."""

from typing import Annotated, Awaitable, Callable

from fastapi import Cookie, Depends, Request

from jolt.application.usecase.identity import GetCurrentIdentityUseCase
from jolt.application.usecase.identity.get_current_identity import (
    GetCurrentIdentityRequest,
)
from jolt.domain.error import ForbiddenError, UnauthenticatedError
from jolt.domain.model import Identity
from jolt.domain.value import IdentityRole

AUTH_COOKIE = "auth_token"


async def get_current_identity(
    request: Request,
    auth_token: Annotated[str | None, Cookie()] = None,
) -> Identity:
    """Resolve the caller from the session cookie.

    Uses the request-scoped container opened by the dishka middleware, so
    the lookup shares the request's session.

    Raises:
        UnauthenticatedError: If no valid session accompanies the request
    """
    if not auth_token:
        raise UnauthenticatedError()
    use_case = await request.state.dishka_container.get(GetCurrentIdentityUseCase)
    return await use_case.execute(GetCurrentIdentityRequest(token=auth_token))


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]


def require_role(*roles: IdentityRole) -> Callable[..., Awaitable[Identity]]:
    """Dependency factory: the caller must hold one of ``roles``.

    Usage:
        @router.post("/moderation/queue")
        async def moderate(
            identity: Annotated[Identity, Depends(require_role(IdentityRole.MODERATOR))],
        ): ...
    """

    async def _require_role(identity: CurrentIdentity) -> Identity:
        if not identity.has_role(*roles):
            raise ForbiddenError()
        return identity

    return _require_role
