"""Identity repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from jolt.domain.model.identity import Identity
from jolt.domain.value import ExternalProviderRef, Handle, IdentityId


class IdentityRepository(ABC):
    """Repository for the Identity aggregate.

    Defines the contract for identity persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[Identity]:
        """Find an identity by handle, ignoring case.

        Args:
            handle: The handle to look up

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_handle(self, handle: Handle) -> bool:
        """Check whether a handle is taken, ignoring case.

        Args:
            handle: The handle to probe

        Returns:
            True if an identity holds the handle
        """
        pass

    @abstractmethod
    async def find_by_provider_ref(
        self, provider_ref: ExternalProviderRef
    ) -> Optional[Identity]:
        """Find the identity bound to an external provider reference.

        Args:
            provider_ref: External provider reference

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, identity: Identity) -> Identity:
        """Insert a new identity.

        Args:
            identity: The identity to insert

        Returns:
            The stored identity

        Raises:
            HandleTakenError: If the handle (case-insensitive) is already used
        """
        pass

    @abstractmethod
    async def touch_last_auth(self, identity_id: IdentityId, at: datetime) -> None:
        """Stamp the last successful authentication time.

        Args:
            identity_id: The identity's unique identifier
            at: Authentication time
        """
        pass

    @abstractmethod
    async def update_secret_key_hash(
        self, identity_id: IdentityId, secret_key_hash: str
    ) -> None:
        """Replace the stored secret key hash.

        Args:
            identity_id: The identity's unique identifier
            secret_key_hash: New argon2 hash
        """
        pass

    @abstractmethod
    async def migrate(
        self, identity_id: IdentityId, provider_ref: ExternalProviderRef
    ) -> Optional[Identity]:
        """Atomically turn an ANONYMOUS identity into a REGISTERED one.

        A single conditional write: it applies only while the identity is
        still ANONYMOUS, and the provider reference uniqueness is enforced
        by the store together with the write. Progress counters are not
        touched.

        Args:
            identity_id: Source identity
            provider_ref: External provider reference to bind

        Returns:
            The migrated identity, or None if no ANONYMOUS identity with
            this ID exists (missing or already migrated)

        Raises:
            ProviderAlreadyLinkedError: If another identity holds the reference
        """
        pass

    @abstractmethod
    async def delete(self, identity_id: IdentityId) -> bool:
        """Hard-delete an identity.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            True if a row was removed
        """
        pass
