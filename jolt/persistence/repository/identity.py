"""PostgreSQL implementation of Identity repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jolt.domain.error import HandleTakenError, ProviderAlreadyLinkedError
from jolt.domain.model import Identity
from jolt.domain.repository import IdentityRepository
from jolt.domain.value import ExternalProviderRef, Handle, IdentityId, IdentityKind
from jolt.persistence.error import translate_store_errors
from jolt.persistence.mappers import identity_to_dict, row_to_identity
from jolt.persistence.tables import identities_table


class PostgresIdentityRepository(IdentityRepository):
    """PostgreSQL implementation of IdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        stmt = select(identities_table).where(identities_table.c.id == identity_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    @translate_store_errors
    async def find_by_handle(self, handle: Handle) -> Optional[Identity]:
        """Find an identity by its case-folded handle."""
        stmt = select(identities_table).where(
            identities_table.c.handle_key == handle.key
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    @translate_store_errors
    async def exists_by_handle(self, handle: Handle) -> bool:
        """Check whether a handle is taken, ignoring case."""
        stmt = select(exists().where(identities_table.c.handle_key == handle.key))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    @translate_store_errors
    async def find_by_provider_ref(
        self, provider_ref: ExternalProviderRef
    ) -> Optional[Identity]:
        """Find the identity bound to a provider reference."""
        stmt = select(identities_table).where(
            identities_table.c.external_provider_ref == provider_ref.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    @translate_store_errors
    async def create(self, identity: Identity) -> Identity:
        """Insert a new identity.

        The insert runs in a savepoint so a handle collision leaves the
        request transaction usable.
        """
        stmt = insert(identities_table).values(**identity_to_dict(identity))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if "handle_key" in str(e.orig):
                raise HandleTakenError() from e
            raise
        return identity

    @translate_store_errors
    async def touch_last_auth(self, identity_id: IdentityId, at: datetime) -> None:
        """Stamp the last successful authentication time."""
        stmt = (
            update(identities_table)
            .where(identities_table.c.id == identity_id)
            .values(last_auth_at=at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def update_secret_key_hash(
        self, identity_id: IdentityId, secret_key_hash: str
    ) -> None:
        """Replace the stored secret key hash."""
        stmt = (
            update(identities_table)
            .where(identities_table.c.id == identity_id)
            .values(secret_key_hash=secret_key_hash)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def migrate(
        self, identity_id: IdentityId, provider_ref: ExternalProviderRef
    ) -> Optional[Identity]:
        """Conditionally flip an ANONYMOUS identity to REGISTERED.

        The WHERE clause on ``kind`` makes the transition happen at most once;
        the unique index on ``external_provider_ref`` rejects a reference
        already bound elsewhere.
        """
        stmt = (
            update(identities_table)
            .where(
                identities_table.c.id == identity_id,
                identities_table.c.kind == IdentityKind.ANONYMOUS.value,
            )
            .values(
                kind=IdentityKind.REGISTERED.value,
                external_provider_ref=provider_ref.root,
            )
            .returning(identities_table)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except IntegrityError as e:
            raise ProviderAlreadyLinkedError() from e
        return row_to_identity(dict(row)) if row else None

    @translate_store_errors
    async def delete(self, identity_id: IdentityId) -> bool:
        """Hard-delete an identity; dependent rows cascade."""
        stmt = delete(identities_table).where(identities_table.c.id == identity_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
