"""Session cookie helpers shared by routes that sign identities in."""

from fastapi import Response

from jolt.config import Settings
from jolt.interface.api.deps import AUTH_COOKIE


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie.

    Production needs a cross-site cookie (frontend and API on different
    hosts), which browsers only accept when it is also Secure.
    """
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    """Remove the session cookie."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
