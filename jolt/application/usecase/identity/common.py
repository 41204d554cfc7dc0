"""Response models shared by identity use cases."""

from datetime import datetime

from pydantic import BaseModel

from jolt.domain.model import Identity
from jolt.domain.value import IdentityKind, IdentityRole


class IdentityInfo(BaseModel):
    """Public view of an identity; never carries hashes."""

    identity_id: str
    handle: str
    kind: IdentityKind
    role: IdentityRole
    region: str | None
    points: int
    level: int
    switch_count: int
    created_at: datetime
    last_auth_at: datetime | None

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityInfo":
        return cls(
            identity_id=str(identity.id),
            handle=identity.handle.root,
            kind=identity.kind,
            role=identity.role,
            region=identity.region,
            points=identity.points,
            level=identity.level,
            switch_count=identity.switch_count,
            created_at=identity.created_at,
            last_auth_at=identity.last_auth_at,
        )


class LoginResponse(BaseModel):
    """Successful login: identity plus a fresh session token."""

    identity: IdentityInfo
    token: str
