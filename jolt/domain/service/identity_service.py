"""Identity domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from jolt.domain.error import (
    HandleTakenError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from jolt.domain.model import Identity
from jolt.domain.model.identity import utcnow
from jolt.domain.repository import IdentityRepository
from jolt.domain.value import ExternalProviderRef, Handle, IdentityId, IdentityKind

from .base import Service
from .hashing_service import HashingService
from .secret_generator import SecretGenerator


def parse_handle(raw: str) -> Handle:
    """Parse a user-supplied handle.

    Raises:
        ValidationError: If the handle is empty, too long or has control chars
    """
    try:
        return Handle(raw)
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"].removeprefix("Value error, "))


class IdentityService(Service):
    """Domain service for anonymous identities and secret-key login."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        secret_generator: SecretGenerator,
        hashing_service: HashingService,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Identity repository
            secret_generator: Secret key generator
            hashing_service: Argon2 hashing service
        """
        self.identity_repository = identity_repository
        self.secret_generator = secret_generator
        self.hashing_service = hashing_service

    async def create_anonymous(
        self, handle: str, region: str | None = None
    ) -> tuple[Identity, str]:
        """Create an anonymous identity.

        The returned secret key is the only copy in existence; only its hash
        is stored.

        Args:
            handle: Requested display handle
            region: Optional free-form region label

        Returns:
            Tuple of (identity, plaintext secret key)

        Raises:
            ValidationError: If the handle is malformed
            HandleTakenError: If the handle is already used (any case)
        """
        parsed = parse_handle(handle)
        with logfire.span("identity_service.create_anonymous", handle=parsed.root):
            if await self.identity_repository.exists_by_handle(parsed):
                logfire.info("Handle already taken", handle=parsed.root)
                raise HandleTakenError()

            secret_key = self.secret_generator.generate_secret_key()
            secret_key_hash = await self.hashing_service.hash_async(secret_key)

            identity = Identity(
                id=IdentityId(uuid4()),
                handle=parsed,
                kind=IdentityKind.ANONYMOUS,
                region=region,
                secret_key_hash=secret_key_hash,
                created_at=utcnow(),
            )
            # The unique handle_key constraint settles concurrent registrations
            created = await self.identity_repository.create(identity)

            logfire.info(
                "Anonymous identity created",
                identity_id=str(created.id),
                handle=created.handle.root,
            )
            return created, secret_key

    async def check_handle_available(self, handle: str) -> bool:
        """Advisory availability probe; the answer may be stale immediately.

        Malformed handles are reported as unavailable.
        """
        try:
            parsed = parse_handle(handle)
        except ValidationError:
            return False
        with logfire.span("identity_service.check_handle", handle=parsed.root):
            return not await self.identity_repository.exists_by_handle(parsed)

    async def find_by_handle(self, handle: str) -> Identity | None:
        """Look up an identity by handle, returning None for malformed input."""
        try:
            parsed = parse_handle(handle)
        except ValidationError:
            return None
        return await self.identity_repository.find_by_handle(parsed)

    async def login_with_secret_key(self, handle: str, secret_key: str) -> Identity:
        """Authenticate an identity by handle and secret key.

        Unknown handles and wrong keys fail identically, and both pay for
        one hash verification.

        Args:
            handle: Display handle (any case)
            secret_key: Plaintext secret key

        Returns:
            Authenticated identity

        Raises:
            InvalidCredentialsError: On any mismatch
        """
        with logfire.span("identity_service.login_with_secret_key"):
            identity = await self.find_by_handle(handle)

            if identity is None or identity.secret_key_hash is None:
                await self.hashing_service.dummy_verify_async(secret_key)
                logfire.warn("Secret key login failed")
                raise InvalidCredentialsError()

            if not await self.hashing_service.verify_async(
                secret_key, identity.secret_key_hash
            ):
                logfire.warn("Secret key login failed")
                raise InvalidCredentialsError()

            if self.hashing_service.needs_rehash(identity.secret_key_hash):
                # Upgrade to the current argon2 parameters while we hold the key
                await self.identity_repository.update_secret_key_hash(
                    identity.id, await self.hashing_service.hash_async(secret_key)
                )
                logfire.info("Secret key hash upgraded", identity_id=str(identity.id))

            authenticated = await self.record_authentication(identity)
            logfire.info("Secret key login succeeded", identity_id=str(identity.id))
            return authenticated

    async def record_authentication(self, identity: Identity) -> Identity:
        """Stamp a successful authentication and return the updated identity."""
        now = utcnow()
        await self.identity_repository.touch_last_auth(identity.id, now)
        return identity.model_copy(update={"last_auth_at": now})

    async def rotate_secret_key(
        self, identity_id: IdentityId, current_secret_key: str
    ) -> str:
        """Replace an identity's secret key.

        Args:
            identity_id: Authenticated identity
            current_secret_key: Proof of possession of the present key

        Returns:
            New plaintext secret key (shown once)

        Raises:
            NotFoundError: If the identity does not exist
            InvalidCredentialsError: If the current key is wrong
        """
        with logfire.span(
            "identity_service.rotate_secret_key", identity_id=str(identity_id)
        ):
            identity = await self.get_by_id(identity_id)
            if not await self.hashing_service.verify_async(
                current_secret_key, identity.secret_key_hash
            ):
                logfire.warn("Secret key rotation refused", identity_id=str(identity_id))
                raise InvalidCredentialsError()

            secret_key = self.secret_generator.generate_secret_key()
            secret_key_hash = await self.hashing_service.hash_async(secret_key)
            await self.identity_repository.update_secret_key_hash(
                identity_id, secret_key_hash
            )
            logfire.info("Secret key rotated", identity_id=str(identity_id))
            return secret_key

    async def login_with_provider(self, provider_ref: ExternalProviderRef) -> Identity:
        """Authenticate the registered identity bound to a provider reference.

        Raises:
            InvalidCredentialsError: If no identity is bound to the reference
        """
        with logfire.span(
            "identity_service.login_with_provider", provider=provider_ref.provider
        ):
            identity = await self.identity_repository.find_by_provider_ref(provider_ref)
            if identity is None:
                logfire.warn("Provider login failed", provider=provider_ref.provider)
                raise InvalidCredentialsError()
            authenticated = await self.record_authentication(identity)
            logfire.info("Provider login succeeded", identity_id=str(identity.id))
            return authenticated

    async def get_by_id(self, identity_id: IdentityId) -> Identity:
        """Get identity by ID.

        Raises:
            NotFoundError: If identity not found
        """
        with logfire.span("identity_service.get_by_id", identity_id=str(identity_id)):
            identity = await self.identity_repository.find_by_id(identity_id)
            if not identity:
                logfire.warn("Identity not found", identity_id=str(identity_id))
                raise NotFoundError("Identity", str(identity_id))
            return identity
