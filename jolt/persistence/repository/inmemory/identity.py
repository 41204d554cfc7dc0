"""In-memory identity repository for testing."""

from datetime import datetime
from typing import Optional

from jolt.domain.error import HandleTakenError, ProviderAlreadyLinkedError
from jolt.domain.model import Identity
from jolt.domain.repository import IdentityRepository
from jolt.domain.value import ExternalProviderRef, Handle, IdentityId, IdentityKind


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing.

    Every check-and-write runs without an ``await`` in between, so it is
    atomic with respect to other coroutines, mirroring the unique
    constraints of the PostgreSQL schema.
    """

    def __init__(self) -> None:
        self._identities: dict[IdentityId, Identity] = {}
        self._by_handle_key: dict[str, IdentityId] = {}
        self._by_provider_ref: dict[str, IdentityId] = {}

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        return self._identities.get(identity_id)

    async def find_by_handle(self, handle: Handle) -> Optional[Identity]:
        """Find an identity by its case-folded handle."""
        identity_id = self._by_handle_key.get(handle.key)
        return self._identities.get(identity_id) if identity_id else None

    async def exists_by_handle(self, handle: Handle) -> bool:
        """Check whether a handle is taken, ignoring case."""
        return handle.key in self._by_handle_key

    async def find_by_provider_ref(
        self, provider_ref: ExternalProviderRef
    ) -> Optional[Identity]:
        """Find the identity bound to a provider reference."""
        identity_id = self._by_provider_ref.get(provider_ref.root)
        return self._identities.get(identity_id) if identity_id else None

    async def create(self, identity: Identity) -> Identity:
        """Insert a new identity."""
        if identity.handle.key in self._by_handle_key:
            raise HandleTakenError()
        self._identities[identity.id] = identity
        self._by_handle_key[identity.handle.key] = identity.id
        return identity

    async def touch_last_auth(self, identity_id: IdentityId, at: datetime) -> None:
        """Stamp the last successful authentication time."""
        identity = self._identities.get(identity_id)
        if identity:
            self._identities[identity_id] = identity.model_copy(
                update={"last_auth_at": at}
            )

    async def update_secret_key_hash(
        self, identity_id: IdentityId, secret_key_hash: str
    ) -> None:
        """Replace the stored secret key hash."""
        identity = self._identities.get(identity_id)
        if identity:
            self._identities[identity_id] = identity.model_copy(
                update={"secret_key_hash": secret_key_hash}
            )

    async def migrate(
        self, identity_id: IdentityId, provider_ref: ExternalProviderRef
    ) -> Optional[Identity]:
        """Conditionally flip an ANONYMOUS identity to REGISTERED."""
        identity = self._identities.get(identity_id)
        if identity is None or identity.kind != IdentityKind.ANONYMOUS:
            return None
        if provider_ref.root in self._by_provider_ref:
            raise ProviderAlreadyLinkedError()

        migrated = identity.model_copy(
            update={
                "kind": IdentityKind.REGISTERED,
                "external_provider_ref": provider_ref,
            }
        )
        self._identities[identity_id] = migrated
        self._by_provider_ref[provider_ref.root] = identity_id
        return migrated

    async def delete(self, identity_id: IdentityId) -> bool:
        """Hard-delete an identity."""
        identity = self._identities.pop(identity_id, None)
        if identity is None:
            return False
        self._by_handle_key.pop(identity.handle.key, None)
        if identity.external_provider_ref:
            self._by_provider_ref.pop(identity.external_provider_ref.root, None)
        return True
