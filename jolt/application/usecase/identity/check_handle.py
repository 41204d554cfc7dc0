"""Handle availability and suggestion use cases."""

import logfire
from pydantic import BaseModel

from jolt.application.usecase.base import BaseUseCase
from jolt.domain.service import IdentityService, suggest_handle


class CheckHandleRequest(BaseModel):
    """Check handle request."""

    handle: str


class CheckHandleResponse(BaseModel):
    """Check handle response.

    Advisory only: registration may still fail with handle_taken.
    """

    handle: str
    available: bool


class CheckHandleUseCase(BaseUseCase[CheckHandleRequest, CheckHandleResponse]):
    """Use case for probing whether a handle is free."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: CheckHandleRequest) -> CheckHandleResponse:
        available = await self.identity_service.check_handle_available(request.handle)
        return CheckHandleResponse(handle=request.handle.strip(), available=available)


class SuggestHandleResponse(BaseModel):
    """Suggested handle."""

    handle: str
    available: bool


class SuggestHandleUseCase:
    """Use case for proposing a random handle, preferring a free one."""

    MAX_ATTEMPTS = 5

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self) -> SuggestHandleResponse:
        with logfire.span("suggest_handle.execute"):
            for _ in range(self.MAX_ATTEMPTS):
                handle = suggest_handle()
                if await self.identity_service.check_handle_available(handle):
                    return SuggestHandleResponse(handle=handle, available=True)
            return SuggestHandleResponse(handle=handle, available=False)
