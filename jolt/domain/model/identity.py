"""Identity aggregate root.

An identity is one account. It starts ANONYMOUS (secret-key only) and may
later be migrated to REGISTERED by binding an external provider reference.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from jolt.domain.model.common import DomainModel
from jolt.domain.value import (
    ExternalProviderRef,
    Handle,
    IdentityId,
    IdentityKind,
    IdentityRole,
)


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


class Identity(DomainModel):
    """Identity aggregate root.

    Progress counters (points, level, switch_count) are owned by downstream
    features; this subsystem only ever carries them over unchanged.
    """

    id: IdentityId
    handle: Handle
    kind: IdentityKind = IdentityKind.ANONYMOUS
    role: IdentityRole = IdentityRole.MEMBER
    region: Optional[str] = None
    external_provider_ref: Optional[ExternalProviderRef] = None
    secret_key_hash: Optional[str] = None
    points: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=0)
    switch_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    last_auth_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_provider_binding(self) -> "Identity":
        """REGISTERED identities have exactly one provider ref, ANONYMOUS none."""
        if self.kind == IdentityKind.REGISTERED and self.external_provider_ref is None:
            raise ValueError("Registered identity requires an external provider ref")
        if self.kind == IdentityKind.ANONYMOUS and self.external_provider_ref is not None:
            raise ValueError("Anonymous identity cannot have an external provider ref")
        return self

    @property
    def is_anonymous(self) -> bool:
        return self.kind == IdentityKind.ANONYMOUS

    def has_role(self, *roles: IdentityRole) -> bool:
        """Check whether the identity holds one of the given roles."""
        return self.role in roles
