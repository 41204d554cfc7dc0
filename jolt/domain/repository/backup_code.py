"""Backup code repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from jolt.domain.model.backup_code import BackupCode
from jolt.domain.value import BackupCodeId, IdentityId


class BackupCodeRepository(ABC):
    """Repository for BackupCode entities."""

    @abstractmethod
    async def count_for_identity(self, identity_id: IdentityId) -> int:
        """Count all codes (consumed or not) belonging to an identity."""
        pass

    @abstractmethod
    async def create_batch(self, codes: list[BackupCode]) -> list[BackupCode]:
        """Insert a whole batch for one identity, all or nothing.

        The store rejects the batch when the identity already owns codes
        (unique identity/slot pairs), so of several concurrent batches
        exactly one lands.

        Args:
            codes: Codes of a single identity

        Returns:
            The stored codes

        Raises:
            BatchAlreadyExistsError: If the identity already has codes
        """
        pass

    @abstractmethod
    async def find_unconsumed(self, identity_id: IdentityId) -> list[BackupCode]:
        """List codes of an identity that have not been consumed yet."""
        pass

    @abstractmethod
    async def find_all_for_identity(self, identity_id: IdentityId) -> list[BackupCode]:
        """List every code of an identity ordered by slot."""
        pass

    @abstractmethod
    async def consume(
        self, code_id: BackupCodeId, action: str, consumed_at: datetime
    ) -> bool:
        """Mark a code consumed if, and only if, it is still unconsumed.

        Args:
            code_id: Code to consume
            action: Action tag to stamp
            consumed_at: Consumption time

        Returns:
            True if this call consumed the code, False if it already was
        """
        pass

    @abstractmethod
    async def delete_all_for_identity(self, identity_id: IdentityId) -> int:
        """Remove every code of an identity (account deletion only).

        Returns:
            Number of removed codes
        """
        pass
