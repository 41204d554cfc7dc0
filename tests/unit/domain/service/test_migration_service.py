"""Unit tests for MigrationService."""

import asyncio
from uuid import uuid4

import pytest

from jolt.domain.error import (
    MigrationAlreadyCompletedError,
    NotFoundError,
    ProviderAlreadyLinkedError,
)
from jolt.domain.model import Identity
from jolt.domain.repository import IdentityRepository, MigrationRecordRepository
from jolt.domain.service import MigrationService
from jolt.domain.value import (
    ExternalProviderRef,
    Handle,
    IdentityId,
    IdentityKind,
    MigrationOutcome,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def seed_identity(unit_env, handle: str = "SwiftTiger42", **counters) -> Identity:
    identity_repo = await unit_env.get(IdentityRepository)
    return await identity_repo.create(
        Identity(
            id=IdentityId(uuid4()),
            handle=Handle(handle),
            secret_key_hash="$argon2id$placeholder",
            **counters,
        )
    )


class TestMigrate:
    """Tests for migrate method."""

    @pytest.mark.asyncio
    async def test_migration_preserves_identity_and_progress(self, unit_env):
        # Arrange
        migration_service = await unit_env.get(MigrationService)
        record_repo = await unit_env.get(MigrationRecordRepository)
        identity = await seed_identity(unit_env, points=120, level=4, switch_count=7)
        ref = ExternalProviderRef("google:1234")

        # Act
        migrated = await migration_service.migrate(identity.id, ref)

        # Assert
        assert migrated.id == identity.id
        assert migrated.handle == identity.handle
        assert migrated.kind == IdentityKind.REGISTERED
        assert migrated.external_provider_ref == ref
        assert (migrated.points, migrated.level, migrated.switch_count) == (120, 4, 7)
        assert migrated.created_at == identity.created_at

        records = await record_repo.find_by_identity(identity.id)
        assert len(records) == 1
        assert records[0].external_provider_ref == ref
        assert records[0].outcome == MigrationOutcome.COMPLETED

    @pytest.mark.asyncio
    async def test_second_migration_is_refused_without_changes(self, unit_env):
        # Arrange
        migration_service = await unit_env.get(MigrationService)
        identity_repo = await unit_env.get(IdentityRepository)
        record_repo = await unit_env.get(MigrationRecordRepository)
        identity = await seed_identity(unit_env, points=50)
        await migration_service.migrate(identity.id, ExternalProviderRef("google:1"))

        # Act
        with pytest.raises(MigrationAlreadyCompletedError):
            await migration_service.migrate(identity.id, ExternalProviderRef("apple:2"))

        # Assert
        stored = await identity_repo.find_by_id(identity.id)
        assert stored.external_provider_ref == ExternalProviderRef("google:1")
        assert stored.points == 50
        assert len(await record_repo.find_by_identity(identity.id)) == 1

    @pytest.mark.asyncio
    async def test_provider_already_linked(self, unit_env):
        # Arrange
        migration_service = await unit_env.get(MigrationService)
        identity_repo = await unit_env.get(IdentityRepository)
        record_repo = await unit_env.get(MigrationRecordRepository)
        first = await seed_identity(unit_env, "First")
        second = await seed_identity(unit_env, "Second")
        ref = ExternalProviderRef("google:1234")
        await migration_service.migrate(first.id, ref)

        # Act
        with pytest.raises(ProviderAlreadyLinkedError):
            await migration_service.migrate(second.id, ref)

        # Assert
        stored = await identity_repo.find_by_id(second.id)
        assert stored.kind == IdentityKind.ANONYMOUS
        assert stored.external_provider_ref is None
        assert await record_repo.find_by_identity(second.id) == []

    @pytest.mark.asyncio
    async def test_unknown_identity(self, unit_env):
        migration_service = await unit_env.get(MigrationService)

        with pytest.raises(NotFoundError):
            await migration_service.migrate(
                IdentityId(uuid4()), ExternalProviderRef("google:1")
            )

    @pytest.mark.asyncio
    async def test_concurrent_migrations_one_winner(self, unit_env):
        # Arrange
        migration_service = await unit_env.get(MigrationService)
        record_repo = await unit_env.get(MigrationRecordRepository)
        identity = await seed_identity(unit_env)

        # Act
        results = await asyncio.gather(
            migration_service.migrate(identity.id, ExternalProviderRef("google:1")),
            migration_service.migrate(identity.id, ExternalProviderRef("apple:2")),
            return_exceptions=True,
        )

        # Assert
        assert sum(isinstance(r, Identity) for r in results) == 1
        assert sum(isinstance(r, MigrationAlreadyCompletedError) for r in results) == 1
        assert len(await record_repo.find_by_identity(identity.id)) == 1
