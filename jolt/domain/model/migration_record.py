"""Migration audit record."""

from datetime import datetime

from pydantic import Field

from jolt.domain.model.common import DomainModel
from jolt.domain.model.identity import utcnow
from jolt.domain.value import (
    ExternalProviderRef,
    IdentityId,
    MigrationOutcome,
    MigrationRecordId,
)


class MigrationRecord(DomainModel):
    """Audit of one anonymous -> registered conversion."""

    id: MigrationRecordId
    identity_id: IdentityId
    external_provider_ref: ExternalProviderRef
    outcome: MigrationOutcome = MigrationOutcome.COMPLETED
    migrated_at: datetime = Field(default_factory=utcnow)
