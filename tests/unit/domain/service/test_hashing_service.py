"""Unit tests for HashingService."""

import pytest

from jolt.config import HashingSettings
from jolt.domain.service import HashingService

# Corrupt record: salt and digest are not base64
NON_ASCII_HASH = "$argon2id$v=19$m=1024,t=1,p=1$\u00e9$\u00e9"


@pytest.fixture
def hashing_service(fast_hashing_settings) -> HashingService:
    return HashingService(fast_hashing_settings)


class TestHashingService:
    """Tests for argon2id hashing and verification."""

    def test_hash_is_argon2id_and_not_plaintext(self, hashing_service):
        hashed = hashing_service.hash("AB12CD34")

        assert hashed.startswith("$argon2id$")
        assert "AB12CD34" not in hashed

    def test_hash_is_salted(self, hashing_service):
        assert hashing_service.hash("AB12CD34") != hashing_service.hash("AB12CD34")

    def test_verify(self, hashing_service):
        hashed = hashing_service.hash("AB12CD34")

        assert hashing_service.verify("AB12CD34", hashed)
        assert not hashing_service.verify("AB12CD35", hashed)

    @pytest.mark.parametrize("stored", [None, "", "not-a-hash"])
    def test_verify_missing_or_malformed_hash_is_false(self, hashing_service, stored):
        assert hashing_service.verify("AB12CD34", stored) is False

    def test_verify_non_ascii_hash_is_false(self, hashing_service):
        assert hashing_service.verify("x", NON_ASCII_HASH) is False

    def test_verify_unencodable_secret_is_false(self, hashing_service):
        hashed = hashing_service.hash("AB12CD34")

        assert hashing_service.verify("\ud800", hashed) is False
        assert hashing_service.dummy_verify("\ud800") is False

    def test_non_ascii_hash_needs_rehash(self, hashing_service):
        assert hashing_service.needs_rehash(NON_ASCII_HASH)

    def test_needs_rehash_after_parameter_change(self, hashing_service):
        hashed = hashing_service.hash("AB12CD34")
        stronger = HashingService(
            HashingSettings(time_cost=2, memory_cost=1024, parallelism=1)
        )

        assert not hashing_service.needs_rehash(hashed)
        assert stronger.needs_rehash(hashed)
        # Old hashes still verify under new parameters
        assert stronger.verify("AB12CD34", hashed)

    def test_dummy_verify_never_succeeds(self, hashing_service):
        assert hashing_service.dummy_verify("anything") is False

    @pytest.mark.asyncio
    async def test_async_variants(self, hashing_service):
        hashed = await hashing_service.hash_async("secret")

        assert await hashing_service.verify_async("secret", hashed)
        assert not await hashing_service.dummy_verify_async("secret")
