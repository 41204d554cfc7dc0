"""Backup code lifecycle domain service."""

from uuid import uuid4

import logfire

from jolt.config import AuthSettings
from jolt.domain.error import (
    BatchAlreadyExistsError,
    InvalidBackupCodeError,
    NotFoundError,
    ValidationError,
)
from jolt.domain.model import BackupCode, Identity
from jolt.domain.model.identity import utcnow
from jolt.domain.repository import BackupCodeRepository, IdentityRepository
from jolt.domain.value import (
    BACKUP_CODE_BATCH_SIZE,
    BACKUP_CODE_LENGTH,
    BackupCodeId,
    IdentityId,
    SensitiveAction,
    normalize_backup_code,
)

from .base import Service
from .hashing_service import HashingService
from .identity_service import parse_handle
from .secret_generator import SecretGenerator


def _is_well_formed(code: str) -> bool:
    return len(code) == BACKUP_CODE_LENGTH and code.isascii() and code.isalnum()


class BackupCodeService(Service):
    """Domain service for the one-time backup code batch.

    Each identity gets exactly one batch. Codes are stored hashed, shown
    in plaintext once at generation, and consumed at most once.
    """

    def __init__(
        self,
        backup_code_repository: BackupCodeRepository,
        identity_repository: IdentityRepository,
        secret_generator: SecretGenerator,
        hashing_service: HashingService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize backup code service.

        Args:
            backup_code_repository: Backup code repository
            identity_repository: Identity repository
            secret_generator: Code generator
            hashing_service: Argon2 hashing service
            auth_settings: Display retention setting
        """
        self.backup_code_repository = backup_code_repository
        self.identity_repository = identity_repository
        self.secret_generator = secret_generator
        self.hashing_service = hashing_service
        self.auth_settings = auth_settings

    async def generate_batch(self, identity_id: IdentityId) -> list[str]:
        """Generate the identity's backup code batch.

        Args:
            identity_id: Owning identity

        Returns:
            Plaintext codes, returned this one time only

        Raises:
            NotFoundError: If the identity does not exist
            BatchAlreadyExistsError: If a batch was generated before
        """
        with logfire.span(
            "backup_code_service.generate_batch", identity_id=str(identity_id)
        ):
            if not await self.identity_repository.find_by_id(identity_id):
                raise NotFoundError("Identity", str(identity_id))

            if await self.backup_code_repository.count_for_identity(identity_id) > 0:
                logfire.info("Backup codes already exist", identity_id=str(identity_id))
                raise BatchAlreadyExistsError()

            plaintext = self.secret_generator.generate_backup_code_batch(BACKUP_CODE_BATCH_SIZE)
            now = utcnow()
            codes = []
            for slot, code in enumerate(plaintext):
                codes.append(
                    BackupCode(
                        id=BackupCodeId(uuid4()),
                        identity_id=identity_id,
                        slot=slot,
                        code_hash=await self.hashing_service.hash_async(code),
                        display_code=(
                            code if self.auth_settings.retain_backup_code_display else None
                        ),
                        created_at=now,
                    )
                )

            # Concurrent generations collide on (identity_id, slot); one wins
            await self.backup_code_repository.create_batch(codes)

            logfire.info(
                "Backup codes generated",
                identity_id=str(identity_id),
                count=len(codes),
            )
            return plaintext

    async def verify(
        self, identity_id: IdentityId, code: str, action: SensitiveAction | str
    ) -> bool:
        """Verify and consume a backup code.

        Args:
            identity_id: Identity the code must belong to
            code: User-entered code (any case, spaces or hyphens allowed)
            action: Tag recorded on the consumed code

        Returns:
            True when this call consumed the code

        Raises:
            InvalidBackupCodeError: If the code is unknown, wrong or already
                used; the three cases are indistinguishable
        """
        action_tag = action.value if isinstance(action, SensitiveAction) else action
        with logfire.span(
            "backup_code_service.verify",
            identity_id=str(identity_id),
            action=action_tag,
        ):
            normalized = normalize_backup_code(code)
            candidates = (
                await self.backup_code_repository.find_unconsumed(identity_id)
                if _is_well_formed(normalized)
                else []
            )
            if not candidates:
                await self.hashing_service.dummy_verify_async(normalized)
                logfire.warn("Backup code rejected", identity_id=str(identity_id))
                raise InvalidBackupCodeError()

            for candidate in candidates:
                if not await self.hashing_service.verify_async(
                    normalized, candidate.code_hash
                ):
                    continue
                if await self.backup_code_repository.consume(
                    candidate.id, action_tag, utcnow()
                ):
                    logfire.info(
                        "Backup code consumed",
                        identity_id=str(identity_id),
                        slot=candidate.slot,
                        action=action_tag,
                    )
                    return True
                # Another request consumed it between our read and write
                break

            logfire.warn("Backup code rejected", identity_id=str(identity_id))
            raise InvalidBackupCodeError()

    async def list_codes(self, identity_id: IdentityId) -> list[BackupCode]:
        """List the identity's codes ordered by slot."""
        with logfire.span(
            "backup_code_service.list_codes", identity_id=str(identity_id)
        ):
            return await self.backup_code_repository.find_all_for_identity(identity_id)

    async def login_with_backup_code(self, handle: str, code: str) -> Identity:
        """Authenticate by handle and a backup code, consuming the code.

        Raises:
            InvalidBackupCodeError: If the handle is unknown or the code fails
        """
        with logfire.span("backup_code_service.login_with_backup_code"):
            try:
                identity = await self.identity_repository.find_by_handle(
                    parse_handle(handle)
                )
            except ValidationError:
                identity = None

            if identity is None:
                await self.hashing_service.dummy_verify_async(code)
                logfire.warn("Backup code login failed")
                raise InvalidBackupCodeError()

            await self.verify(identity.id, code, SensitiveAction.LOGIN)

            now = utcnow()
            await self.identity_repository.touch_last_auth(identity.id, now)
            logfire.info("Backup code login succeeded", identity_id=str(identity.id))
            return identity.model_copy(update={"last_auth_at": now})
