"""Unit tests for SensitiveActionService."""

import pytest

from jolt.domain.error import InvalidBackupCodeError
from jolt.domain.repository import (
    BackupCodeRepository,
    IdentityRepository,
    MigrationRecordRepository,
)
from jolt.domain.service import (
    BackupCodeService,
    IdentityService,
    MigrationService,
    SensitiveActionService,
)
from jolt.domain.value import ExternalProviderRef
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def identity_with_codes(unit_env, handle: str = "SwiftTiger42"):
    identity_service = await unit_env.get(IdentityService)
    backup_code_service = await unit_env.get(BackupCodeService)
    identity, _ = await identity_service.create_anonymous(handle)
    codes = await backup_code_service.generate_batch(identity.id)
    return identity, codes


class TestExportData:
    """Tests for export_data method."""

    @pytest.mark.asyncio
    async def test_export_with_valid_code(self, unit_env):
        # Arrange
        sensitive_action_service = await unit_env.get(SensitiveActionService)
        migration_service = await unit_env.get(MigrationService)
        identity, codes = await identity_with_codes(unit_env)
        await migration_service.migrate(identity.id, ExternalProviderRef("google:9"))

        # Act
        export = await sensitive_action_service.export_data(identity.id, codes[0])

        # Assert
        assert export.identity.id == identity.id
        assert len(export.backup_codes) == 8
        assert export.backup_codes[0].consumed_for == "export_data"
        assert len(export.migration_records) == 1

    @pytest.mark.asyncio
    async def test_invalid_code_exports_nothing(self, unit_env):
        # Arrange
        sensitive_action_service = await unit_env.get(SensitiveActionService)
        backup_code_repo = await unit_env.get(BackupCodeRepository)
        identity, _ = await identity_with_codes(unit_env)

        # Act
        with pytest.raises(InvalidBackupCodeError):
            await sensitive_action_service.export_data(identity.id, "ZZZZZZZZ")

        # Assert
        assert len(await backup_code_repo.find_unconsumed(identity.id)) == 8

    @pytest.mark.asyncio
    async def test_each_action_needs_a_fresh_code(self, unit_env):
        sensitive_action_service = await unit_env.get(SensitiveActionService)
        identity, codes = await identity_with_codes(unit_env)
        await sensitive_action_service.export_data(identity.id, codes[0])

        with pytest.raises(InvalidBackupCodeError):
            await sensitive_action_service.export_data(identity.id, codes[0])


class TestDeleteAccount:
    """Tests for delete_account method."""

    @pytest.mark.asyncio
    async def test_delete_removes_everything(self, unit_env):
        # Arrange
        sensitive_action_service = await unit_env.get(SensitiveActionService)
        migration_service = await unit_env.get(MigrationService)
        identity_service = await unit_env.get(IdentityService)
        identity_repo = await unit_env.get(IdentityRepository)
        backup_code_repo = await unit_env.get(BackupCodeRepository)
        record_repo = await unit_env.get(MigrationRecordRepository)
        identity, codes = await identity_with_codes(unit_env)
        await migration_service.migrate(identity.id, ExternalProviderRef("google:9"))

        # Act
        await sensitive_action_service.delete_account(identity.id, codes[5])

        # Assert
        assert await identity_repo.find_by_id(identity.id) is None
        assert await backup_code_repo.count_for_identity(identity.id) == 0
        assert await record_repo.find_by_identity(identity.id) == []
        assert await identity_service.check_handle_available("SwiftTiger42")
        assert (
            await identity_repo.find_by_provider_ref(ExternalProviderRef("google:9"))
            is None
        )

    @pytest.mark.asyncio
    async def test_invalid_code_deletes_nothing(self, unit_env):
        # Arrange
        sensitive_action_service = await unit_env.get(SensitiveActionService)
        identity_repo = await unit_env.get(IdentityRepository)
        identity, _ = await identity_with_codes(unit_env)

        # Act
        with pytest.raises(InvalidBackupCodeError):
            await sensitive_action_service.delete_account(identity.id, "ZZZZZZZZ")

        # Assert
        assert await identity_repo.find_by_id(identity.id) is not None
