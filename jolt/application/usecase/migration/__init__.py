"""Migration use cases."""

from .migrate_identity import MigrateIdentityUseCase

__all__ = ["MigrateIdentityUseCase"]
