"""Strongly typed identifiers for identity-subsystem entities.

Using NewType prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

IdentityId = NewType("IdentityId", UUID)
BackupCodeId = NewType("BackupCodeId", UUID)
MigrationRecordId = NewType("MigrationRecordId", UUID)
