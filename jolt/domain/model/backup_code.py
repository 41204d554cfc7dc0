"""Backup code entity.

One of a fixed, one-time batch of single-use recovery tokens.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from jolt.domain.model.common import DomainModel
from jolt.domain.model.identity import utcnow
from jolt.domain.value import BackupCodeId, IdentityId


class BackupCode(DomainModel):
    """Single-use backup code.

    ``display_code`` holds the plaintext only when display retention is
    enabled in settings; otherwise it stays None.
    """

    id: BackupCodeId
    identity_id: IdentityId
    slot: int = Field(ge=0)  # Position in the batch, unique per identity
    code_hash: str
    display_code: Optional[str] = None
    consumed: bool = False
    consumed_at: Optional[datetime] = None
    consumed_for: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
