"""PostgreSQL implementation of MigrationRecord repository."""

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from jolt.domain.model import MigrationRecord
from jolt.domain.repository import MigrationRecordRepository
from jolt.domain.value import IdentityId
from jolt.persistence.error import translate_store_errors
from jolt.persistence.mappers import migration_record_to_dict, row_to_migration_record
from jolt.persistence.tables import migration_records_table


class PostgresMigrationRecordRepository(MigrationRecordRepository):
    """PostgreSQL implementation of MigrationRecordRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_store_errors
    async def save(self, record: MigrationRecord) -> MigrationRecord:
        """Insert an audit record."""
        stmt = insert(migration_records_table).values(**migration_record_to_dict(record))
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    @translate_store_errors
    async def find_by_identity(self, identity_id: IdentityId) -> list[MigrationRecord]:
        """List audit records of an identity."""
        stmt = (
            select(migration_records_table)
            .where(migration_records_table.c.identity_id == identity_id)
            .order_by(migration_records_table.c.migrated_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_migration_record(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def delete_all_for_identity(self, identity_id: IdentityId) -> int:
        """Remove audit records of an identity."""
        stmt = delete(migration_records_table).where(
            migration_records_table.c.identity_id == identity_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
