"""Domain value objects for Jolt identities.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import unicodedata
from enum import Enum

from pydantic import field_validator

from jolt.domain.value.common import RootValueObject

HANDLE_MAX_LENGTH = 20
BACKUP_CODE_LENGTH = 8
# One batch per identity, never topped up or regenerated
BACKUP_CODE_BATCH_SIZE = 8


class IdentityKind(str, Enum):
    """How an identity authenticates.

    ANONYMOUS identities hold only a self-kept secret key; REGISTERED ones
    are bound to an external provider reference.
    """

    ANONYMOUS = "anonymous"
    REGISTERED = "registered"


class IdentityRole(str, Enum):
    """Roles read by downstream features (moderation, missions)."""

    MEMBER = "member"
    MODERATOR = "moderator"
    STRATEGIST = "strategist"
    ADMIN = "admin"


class SensitiveAction(str, Enum):
    """Action tags stamped on consumed backup codes."""

    EXPORT_DATA = "export_data"
    DELETE_ACCOUNT = "delete_account"
    LOGIN = "login"
    VERIFICATION = "verification"


class MigrationOutcome(str, Enum):
    """Outcome recorded in the migration audit."""

    COMPLETED = "completed"


class Handle(RootValueObject[str]):
    """Display name of an identity.

    Surrounding whitespace is stripped; 1-20 characters; no control
    characters. Case is preserved for display but uniqueness is judged on
    ``key`` (case-folded).
    """

    @field_validator("root")
    @classmethod
    def validate_handle(cls, v: str) -> str:
        """Validate handle length and characters."""
        v = v.strip()
        if len(v) < 1 or len(v) > HANDLE_MAX_LENGTH:
            raise ValueError(f"Handle must be 1-{HANDLE_MAX_LENGTH} characters")
        if any(unicodedata.category(ch).startswith("C") for ch in v):
            raise ValueError("Handle must not contain control characters")
        return v

    @property
    def key(self) -> str:
        """Case-insensitive uniqueness key."""
        return self.root.casefold()


class ExternalProviderRef(RootValueObject[str]):
    """Stable reference to an account at an external identity provider.

    Format: ``<provider>:<subject>`` (e.g. ``google:10769150350006150715113082367``).
    """

    @field_validator("root")
    @classmethod
    def validate_ref(cls, v: str) -> str:
        """Validate the provider/subject shape."""
        provider, sep, subject = v.partition(":")
        if not sep or not provider or not subject:
            raise ValueError("Provider reference must look like '<provider>:<subject>'")
        if len(v) > 255:
            raise ValueError("Provider reference must be at most 255 characters")
        return v

    @property
    def provider(self) -> str:
        """Provider part of the reference."""
        return self.root.partition(":")[0]


def normalize_backup_code(code: str) -> str:
    """Normalise user input of a backup code.

    Users copy codes with spaces or hyphens and in any case.
    """
    return "".join(ch for ch in code if ch not in " -\t").upper()
