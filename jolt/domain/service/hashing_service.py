"""One-way hashing for secret keys and backup codes."""

import asyncio
import secrets

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from jolt.config import HashingSettings

from .base import Service


class HashingService(Service):
    """Salted argon2id hashing with constant-time verification.

    Hashes are PHC strings (``$argon2id$v=19$m=...,t=...,p=...$salt$hash``)
    so parameters can change without invalidating stored records.
    Verification never raises: mismatches and malformed records are both
    reported as False.
    """

    def __init__(self, hashing_settings: HashingSettings) -> None:
        """Initialize hashing service.

        Args:
            hashing_settings: Argon2 cost parameters
        """
        self._hasher = PasswordHasher(
            time_cost=hashing_settings.time_cost,
            memory_cost=hashing_settings.memory_cost,
            parallelism=hashing_settings.parallelism,
            hash_len=hashing_settings.hash_len,
            salt_len=hashing_settings.salt_len,
            type=Type.ID,
        )
        self._dummy_hash: str | None = None

    def hash(self, secret: str) -> str:
        """Hash a secret.

        Args:
            secret: Plaintext secret key or backup code

        Returns:
            Encoded argon2id hash
        """
        return self._hasher.hash(secret)

    def verify(self, secret: str, hashed: str | None) -> bool:
        """Verify a secret against a stored hash in constant time.

        Args:
            secret: Plaintext candidate
            hashed: Stored hash (may be missing or malformed)

        Returns:
            True only if the secret matches
        """
        if not hashed:
            return False
        try:
            return self._hasher.verify(hashed, secret)
        # argon2 encodes the hash as ASCII and the secret as UTF-8
        except (VerificationError, InvalidHashError, UnicodeEncodeError):
            return False

    def needs_rehash(self, hashed: str) -> bool:
        """Whether a stored hash was produced with outdated parameters."""
        try:
            return self._hasher.check_needs_rehash(hashed)
        except (InvalidHashError, UnicodeEncodeError):
            return True

    def dummy_verify(self, secret: str) -> bool:
        """Burn one verification's worth of time against a throw-away hash.

        Used when there is no stored hash to compare against, so that the
        caller's latency does not reveal it.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self._hasher.hash(secrets.token_urlsafe(16))
        self.verify(secret, self._dummy_hash)
        return False

    async def hash_async(self, secret: str) -> str:
        """Hash on a worker thread."""
        return await asyncio.to_thread(self.hash, secret)

    async def verify_async(self, secret: str, hashed: str | None) -> bool:
        """Verify on a worker thread."""
        return await asyncio.to_thread(self.verify, secret, hashed)

    async def dummy_verify_async(self, secret: str) -> bool:
        """Dummy verification on a worker thread."""
        return await asyncio.to_thread(self.dummy_verify, secret)
