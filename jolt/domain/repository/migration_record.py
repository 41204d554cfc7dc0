"""Migration record repository interface."""

from abc import ABC, abstractmethod

from jolt.domain.model.migration_record import MigrationRecord
from jolt.domain.value import IdentityId


class MigrationRecordRepository(ABC):
    """Repository for the migration audit trail."""

    @abstractmethod
    async def save(self, record: MigrationRecord) -> MigrationRecord:
        """Insert an audit record.

        Args:
            record: Record to insert

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def find_by_identity(self, identity_id: IdentityId) -> list[MigrationRecord]:
        """List audit records of an identity, oldest first."""
        pass

    @abstractmethod
    async def delete_all_for_identity(self, identity_id: IdentityId) -> int:
        """Remove audit records of an identity (account deletion only)."""
        pass
