"""In-memory migration record repository for testing."""

from sqlalchemy.exc import IntegrityError

from jolt.domain.model import MigrationRecord
from jolt.domain.repository import MigrationRecordRepository
from jolt.domain.value import IdentityId


class InMemoryMigrationRecordRepository(MigrationRecordRepository):
    """In-memory implementation of MigrationRecordRepository for testing."""

    def __init__(self) -> None:
        self._records: list[MigrationRecord] = []

    async def save(self, record: MigrationRecord) -> MigrationRecord:
        """Insert an audit record.

        Raises:
            IntegrityError: If the identity already has a record
        """
        if any(r.identity_id == record.identity_id for r in self._records):
            raise IntegrityError("Duplicate migration record", None, Exception())
        self._records.append(record)
        return record

    async def find_by_identity(self, identity_id: IdentityId) -> list[MigrationRecord]:
        """List audit records of an identity."""
        return [r for r in self._records if r.identity_id == identity_id]

    async def delete_all_for_identity(self, identity_id: IdentityId) -> int:
        """Remove audit records of an identity."""
        before = len(self._records)
        self._records = [r for r in self._records if r.identity_id != identity_id]
        return before - len(self._records)
