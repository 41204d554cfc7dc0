"""Session token encoding.

Session tokens are HS256 JWTs. ``sub`` carries the identity id; ``handle``
and ``kind`` are informational copies taken at issue time and are not
trusted for authorization (the identity is always reloaded).
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field

from jolt.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    identity_id: str = Field(alias="sub")
    handle: str
    kind: str
    issued_at: datetime = Field(alias="iat")
    exp: datetime


class JWTError(Exception):
    """Session token is missing claims, expired or wrongly signed."""


def create_token(
    identity_id: str, handle: str, kind: str, settings: AuthSettings
) -> str:
    """Issue a session token valid for ``settings.jwt_expiry_days``."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": identity_id,
        "handle": handle,
        "kind": kind,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then decode the claims.

    Raises:
        JWTError: If the token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token")
