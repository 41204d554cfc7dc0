"""PostgreSQL implementation of BackupCode repository."""

from datetime import datetime

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jolt.domain.error import BatchAlreadyExistsError
from jolt.domain.model import BackupCode
from jolt.domain.repository import BackupCodeRepository
from jolt.domain.value import BackupCodeId, IdentityId
from jolt.persistence.error import translate_store_errors
from jolt.persistence.mappers import backup_code_to_dict, row_to_backup_code
from jolt.persistence.tables import backup_codes_table


class PostgresBackupCodeRepository(BackupCodeRepository):
    """PostgreSQL implementation of BackupCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def count_for_identity(self, identity_id: IdentityId) -> int:
        """Count all codes of an identity."""
        stmt = (
            select(func.count())
            .select_from(backup_codes_table)
            .where(backup_codes_table.c.identity_id == identity_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_store_errors
    async def create_batch(self, codes: list[BackupCode]) -> list[BackupCode]:
        """Insert a batch in one statement; slot collisions reject all of it."""
        stmt = insert(backup_codes_table).values(
            [backup_code_to_dict(code) for code in codes]
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise BatchAlreadyExistsError() from e
        return codes

    @translate_store_errors
    async def find_unconsumed(self, identity_id: IdentityId) -> list[BackupCode]:
        """List unconsumed codes of an identity."""
        stmt = (
            select(backup_codes_table)
            .where(
                backup_codes_table.c.identity_id == identity_id,
                backup_codes_table.c.consumed.is_(False),
            )
            .order_by(backup_codes_table.c.slot)
        )
        result = await self.session.execute(stmt)
        return [row_to_backup_code(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def find_all_for_identity(self, identity_id: IdentityId) -> list[BackupCode]:
        """List every code of an identity ordered by slot."""
        stmt = (
            select(backup_codes_table)
            .where(backup_codes_table.c.identity_id == identity_id)
            .order_by(backup_codes_table.c.slot)
        )
        result = await self.session.execute(stmt)
        return [row_to_backup_code(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def consume(
        self, code_id: BackupCodeId, action: str, consumed_at: datetime
    ) -> bool:
        """Consume a code with a single conditional update."""
        stmt = (
            update(backup_codes_table)
            .where(
                backup_codes_table.c.id == code_id,
                backup_codes_table.c.consumed.is_(False),
            )
            .values(consumed=True, consumed_at=consumed_at, consumed_for=action)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    @translate_store_errors
    async def delete_all_for_identity(self, identity_id: IdentityId) -> int:
        """Remove every code of an identity."""
        stmt = delete(backup_codes_table).where(
            backup_codes_table.c.identity_id == identity_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
