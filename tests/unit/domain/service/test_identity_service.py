"""Unit tests for IdentityService."""

import asyncio
from uuid import uuid4

import pytest

from jolt.config import HashingSettings
from jolt.domain.error import (
    HandleTakenError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from jolt.domain.repository import IdentityRepository
from jolt.domain.service import HashingService, IdentityService, SecretGenerator
from jolt.domain.value import Handle, IdentityId, IdentityKind
from jolt.persistence.repository.inmemory import InMemoryIdentityRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateAnonymous:
    """Tests for create_anonymous method."""

    @pytest.mark.asyncio
    async def test_creates_identity_and_returns_key_once(self, unit_env):
        """Only the key's hash is stored."""
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        hashing_service = await unit_env.get(HashingService)
        identity_repo = await unit_env.get(IdentityRepository)

        # Act
        identity, secret_key = await identity_service.create_anonymous(
            " SwiftTiger42 ", region="north"
        )

        # Assert
        assert identity.handle.root == "SwiftTiger42"
        assert identity.kind == IdentityKind.ANONYMOUS
        assert identity.region == "north"
        assert identity.secret_key_hash != secret_key
        assert secret_key not in identity.model_dump_json()
        assert hashing_service.verify(secret_key, identity.secret_key_hash)

        stored = await identity_repo.find_by_id(identity.id)
        assert stored == identity

    @pytest.mark.asyncio
    async def test_duplicate_handle_in_other_case_is_taken(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        await identity_service.create_anonymous("SwiftTiger42")

        with pytest.raises(HandleTakenError):
            await identity_service.create_anonymous("swifttiger42")

    @pytest.mark.asyncio
    async def test_malformed_handle(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        with pytest.raises(ValidationError, match="1-20 characters"):
            await identity_service.create_anonymous("x" * 21)

    @pytest.mark.asyncio
    async def test_concurrent_registrations_one_winner(self, unit_env):
        """Two racing registrations of one handle: exactly one succeeds."""
        # Arrange
        identity_service = await unit_env.get(IdentityService)

        # Act
        results = await asyncio.gather(
            identity_service.create_anonymous("Racer"),
            identity_service.create_anonymous("RACER"),
            return_exceptions=True,
        )

        # Assert
        winners = [r for r in results if isinstance(r, tuple)]
        losers = [r for r in results if isinstance(r, HandleTakenError)]
        assert len(winners) == 1
        assert len(losers) == 1


class TestCheckHandleAvailable:
    """Tests for check_handle_available method."""

    @pytest.mark.asyncio
    async def test_free_then_taken(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        assert await identity_service.check_handle_available("SwiftTiger42")

        await identity_service.create_anonymous("SwiftTiger42")

        assert not await identity_service.check_handle_available("SWIFTTIGER42")

    @pytest.mark.asyncio
    async def test_malformed_handle_is_unavailable(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        assert not await identity_service.check_handle_available("")


class TestLoginWithSecretKey:
    """Tests for login_with_secret_key method."""

    @pytest.mark.asyncio
    async def test_login_succeeds_and_stamps_last_auth(self, unit_env):
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        identity_repo = await unit_env.get(IdentityRepository)
        created, secret_key = await identity_service.create_anonymous("SwiftTiger42")

        # Act
        identity = await identity_service.login_with_secret_key(
            "swifttiger42", secret_key
        )

        # Assert
        assert identity.id == created.id
        assert identity.last_auth_at is not None
        stored = await identity_repo.find_by_id(created.id)
        assert stored.last_auth_at == identity.last_auth_at

    @pytest.mark.asyncio
    async def test_unknown_handle_and_wrong_key_are_indistinguishable(self, unit_env):
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        await identity_service.create_anonymous("SwiftTiger42")

        # Act
        with pytest.raises(InvalidCredentialsError) as wrong_key:
            await identity_service.login_with_secret_key("SwiftTiger42", "wrong")
        with pytest.raises(InvalidCredentialsError) as unknown_handle:
            await identity_service.login_with_secret_key("NoSuchHandle", "wrong")
        with pytest.raises(InvalidCredentialsError) as malformed_handle:
            await identity_service.login_with_secret_key("", "wrong")

        # Assert
        assert str(wrong_key.value) == str(unknown_handle.value)
        assert str(wrong_key.value) == str(malformed_handle.value)
        assert wrong_key.value.kind == unknown_handle.value.kind

    @pytest.mark.asyncio
    async def test_corrupt_stored_hash_fails_as_invalid_credentials(self, unit_env):
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        identity_repo = await unit_env.get(IdentityRepository)
        identity, secret_key = await identity_service.create_anonymous("SwiftTiger42")
        await identity_repo.update_secret_key_hash(
            identity.id, "$argon2id$v=19$m=1024,t=1,p=1$é$é"
        )

        # Act / Assert
        with pytest.raises(InvalidCredentialsError):
            await identity_service.login_with_secret_key("SwiftTiger42", secret_key)
        with pytest.raises(InvalidCredentialsError):
            await identity_service.rotate_secret_key(identity.id, secret_key)

    @pytest.mark.asyncio
    async def test_unencodable_secret_key(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        await identity_service.create_anonymous("SwiftTiger42")

        with pytest.raises(InvalidCredentialsError):
            await identity_service.login_with_secret_key("SwiftTiger42", "\ud800")


class TestRotateSecretKey:
    """Tests for rotate_secret_key method."""

    @pytest.mark.asyncio
    async def test_rotation_replaces_key(self, unit_env):
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        identity, old_key = await identity_service.create_anonymous("SwiftTiger42")

        # Act
        new_key = await identity_service.rotate_secret_key(identity.id, old_key)

        # Assert
        assert new_key != old_key
        await identity_service.login_with_secret_key("SwiftTiger42", new_key)
        with pytest.raises(InvalidCredentialsError):
            await identity_service.login_with_secret_key("SwiftTiger42", old_key)

    @pytest.mark.asyncio
    async def test_wrong_current_key_is_refused(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        identity, secret_key = await identity_service.create_anonymous("SwiftTiger42")

        with pytest.raises(InvalidCredentialsError):
            await identity_service.rotate_secret_key(identity.id, "not-the-key")

        await identity_service.login_with_secret_key("SwiftTiger42", secret_key)


class TestGetById:
    """Tests for get_by_id and find_by_handle."""

    @pytest.mark.asyncio
    async def test_missing_identity(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        with pytest.raises(NotFoundError):
            await identity_service.get_by_id(IdentityId(uuid4()))

    @pytest.mark.asyncio
    async def test_find_by_handle_ignores_case(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        identity, _ = await identity_service.create_anonymous("SwiftTiger42")

        found = await identity_service.find_by_handle("SWIFTtiger42")

        assert found.id == identity.id
        assert found.handle == Handle("SwiftTiger42")
        assert await identity_service.find_by_handle("") is None


class TestHashUpgrade:
    """Outdated argon2 parameters are upgraded at login."""

    @pytest.mark.asyncio
    async def test_login_rehashes_with_current_parameters(self, fast_hashing_settings):
        # Arrange
        identity_repo = InMemoryIdentityRepository()
        before = IdentityService(
            identity_repo, SecretGenerator(), HashingService(fast_hashing_settings)
        )
        identity, secret_key = await before.create_anonymous("SwiftTiger42")
        stronger = HashingService(
            HashingSettings(time_cost=2, memory_cost=1024, parallelism=1)
        )
        after = IdentityService(identity_repo, SecretGenerator(), stronger)

        # Act
        await after.login_with_secret_key("SwiftTiger42", secret_key)

        # Assert
        stored = await identity_repo.find_by_id(identity.id)
        assert stored.secret_key_hash != identity.secret_key_hash
        assert not stronger.needs_rehash(stored.secret_key_hash)
        await after.login_with_secret_key("SwiftTiger42", secret_key)
