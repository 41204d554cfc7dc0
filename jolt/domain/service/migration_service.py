"""Anonymous to registered migration domain service."""

from uuid import uuid4

import logfire

from jolt.domain.error import (
    MigrationAlreadyCompletedError,
    NotFoundError,
    ProviderAlreadyLinkedError,
)
from jolt.domain.model import Identity, MigrationRecord
from jolt.domain.model.identity import utcnow
from jolt.domain.repository import IdentityRepository, MigrationRecordRepository
from jolt.domain.value import (
    ExternalProviderRef,
    IdentityId,
    MigrationOutcome,
    MigrationRecordId,
)

from .base import Service


class MigrationService(Service):
    """Domain service binding an anonymous identity to a provider account.

    Migration keeps the identity's id, handle and progress counters; only
    ``kind`` and ``external_provider_ref`` change, once.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        migration_record_repository: MigrationRecordRepository,
    ) -> None:
        """Initialize migration service.

        Args:
            identity_repository: Identity repository
            migration_record_repository: Migration audit repository
        """
        self.identity_repository = identity_repository
        self.migration_record_repository = migration_record_repository

    async def migrate(
        self, identity_id: IdentityId, provider_ref: ExternalProviderRef
    ) -> Identity:
        """Convert an anonymous identity into a registered one.

        Args:
            identity_id: Identity to migrate
            provider_ref: External provider reference to bind

        Returns:
            The registered identity

        Raises:
            NotFoundError: If the identity does not exist
            MigrationAlreadyCompletedError: If it is already registered
            ProviderAlreadyLinkedError: If another identity holds the reference
        """
        with logfire.span(
            "migration_service.migrate",
            identity_id=str(identity_id),
            provider=provider_ref.provider,
        ):
            try:
                migrated = await self.identity_repository.migrate(
                    identity_id, provider_ref
                )
            except ProviderAlreadyLinkedError:
                logfire.warn(
                    "Provider already linked to another identity",
                    identity_id=str(identity_id),
                    provider=provider_ref.provider,
                )
                raise

            if migrated is None:
                if await self.identity_repository.find_by_id(identity_id) is None:
                    logfire.warn("Migration of unknown identity", identity_id=str(identity_id))
                    raise NotFoundError("Identity", str(identity_id))
                logfire.info("Migration already completed", identity_id=str(identity_id))
                raise MigrationAlreadyCompletedError()

            await self.migration_record_repository.save(
                MigrationRecord(
                    id=MigrationRecordId(uuid4()),
                    identity_id=identity_id,
                    external_provider_ref=provider_ref,
                    outcome=MigrationOutcome.COMPLETED,
                    migrated_at=utcnow(),
                )
            )

            logfire.info(
                "Identity migrated",
                identity_id=str(identity_id),
                provider=provider_ref.provider,
                points=migrated.points,
                level=migrated.level,
            )
            return migrated
