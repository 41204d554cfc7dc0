"""In-memory backup code repository for testing."""

from datetime import datetime

from jolt.domain.error import BatchAlreadyExistsError
from jolt.domain.model import BackupCode
from jolt.domain.repository import BackupCodeRepository
from jolt.domain.value import BackupCodeId, IdentityId


class InMemoryBackupCodeRepository(BackupCodeRepository):
    """In-memory implementation of BackupCodeRepository for testing."""

    def __init__(self) -> None:
        self._codes: dict[BackupCodeId, BackupCode] = {}

    def all_rows(self) -> list[BackupCode]:
        """Every stored code (test inspection)."""
        return list(self._codes.values())

    def _for_identity(self, identity_id: IdentityId) -> list[BackupCode]:
        return sorted(
            (c for c in self._codes.values() if c.identity_id == identity_id),
            key=lambda c: c.slot,
        )

    async def count_for_identity(self, identity_id: IdentityId) -> int:
        """Count all codes of an identity."""
        return len(self._for_identity(identity_id))

    async def create_batch(self, codes: list[BackupCode]) -> list[BackupCode]:
        """Insert a batch unless the identity already holds any of its slots."""
        taken = {(c.identity_id, c.slot) for c in self._codes.values()}
        if any((c.identity_id, c.slot) in taken for c in codes):
            raise BatchAlreadyExistsError()
        for code in codes:
            self._codes[code.id] = code
        return codes

    async def find_unconsumed(self, identity_id: IdentityId) -> list[BackupCode]:
        """List unconsumed codes of an identity."""
        return [c for c in self._for_identity(identity_id) if not c.consumed]

    async def find_all_for_identity(self, identity_id: IdentityId) -> list[BackupCode]:
        """List every code of an identity ordered by slot."""
        return self._for_identity(identity_id)

    async def consume(
        self, code_id: BackupCodeId, action: str, consumed_at: datetime
    ) -> bool:
        """Consume a code if still unconsumed."""
        code = self._codes.get(code_id)
        if code is None or code.consumed:
            return False
        self._codes[code_id] = code.model_copy(
            update={
                "consumed": True,
                "consumed_at": consumed_at,
                "consumed_for": action,
            }
        )
        return True

    async def delete_all_for_identity(self, identity_id: IdentityId) -> int:
        """Remove every code of an identity."""
        doomed = [c.id for c in self._codes.values() if c.identity_id == identity_id]
        for code_id in doomed:
            del self._codes[code_id]
        return len(doomed)
