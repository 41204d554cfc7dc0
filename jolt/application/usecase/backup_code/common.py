"""Backup code status models."""

from datetime import datetime

from pydantic import BaseModel

from jolt.domain.model import BackupCode


class BackupCodeStatus(BaseModel):
    """Status of one code. ``code`` is set only when display retention is on."""

    slot: int
    consumed: bool
    consumed_at: datetime | None
    consumed_for: str | None
    code: str | None = None

    @classmethod
    def from_backup_code(
        cls, backup_code: BackupCode, include_code: bool = False
    ) -> "BackupCodeStatus":
        return cls(
            slot=backup_code.slot,
            consumed=backup_code.consumed,
            consumed_at=backup_code.consumed_at,
            consumed_for=backup_code.consumed_for,
            code=backup_code.display_code if include_code else None,
        )
