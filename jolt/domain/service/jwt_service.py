"""Session token domain service."""

import logfire

from jolt.config import AuthSettings
from jolt.domain.model import Identity
from jolt.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the session tokens carried in the auth cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, identity: Identity) -> str:
        """Issue a session token reflecting the identity's current kind."""
        token = create_token(
            str(identity.id),
            identity.handle.root,
            identity.kind.value,
            self.auth_settings,
        )
        logfire.debug(
            "Session token issued",
            identity_id=str(identity.id),
            kind=identity.kind.value,
        )
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Session token rejected", reason=str(e))
            raise
