"""SQLAlchemy table definitions for Jolt identities.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# IDENTITIES TABLE
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("handle", String(20), nullable=False),  # Display case preserved
    Column("handle_key", String(80), nullable=False),  # casefold(handle)
    Column(
        "kind",
        Enum("anonymous", "registered", name="identity_kind", create_type=False),
        nullable=False,
        server_default="anonymous",
    ),
    Column(
        "role",
        Enum(
            "member",
            "moderator",
            "strategist",
            "admin",
            name="identity_role",
            create_type=False,
        ),
        nullable=False,
        server_default="member",
    ),
    Column("region", String(100), nullable=True),
    Column("external_provider_ref", String(255), nullable=True),
    Column("secret_key_hash", Text, nullable=True),  # argon2id PHC string
    Column("points", Integer, nullable=False, server_default="0"),
    Column("level", Integer, nullable=False, server_default="1"),
    Column("switch_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_auth_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("handle_key", name="uq_identities_handle_key"),
    UniqueConstraint("external_provider_ref", name="uq_identities_provider_ref"),
    CheckConstraint(
        "(kind = 'registered') = (external_provider_ref IS NOT NULL)",
        name="registered_has_provider_ref",
    ),
    CheckConstraint("points >= 0", name="points_non_negative"),
    CheckConstraint("level >= 0", name="level_non_negative"),
    CheckConstraint("switch_count >= 0", name="switch_count_non_negative"),
)

# ============================================================================
# BACKUP CODES TABLE
# ============================================================================
backup_codes_table = Table(
    "backup_codes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("slot", Integer, nullable=False),
    Column("code_hash", Text, nullable=False),
    Column("display_code", String(8), nullable=True),  # Only with display retention
    Column("consumed", Boolean, nullable=False, server_default="false"),
    Column("consumed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("consumed_for", String(50), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One batch per identity: a second batch collides on slot 0
    UniqueConstraint("identity_id", "slot", name="uq_backup_code_slot"),
    CheckConstraint("slot >= 0", name="slot_non_negative"),
)

Index(
    "idx_backup_codes_identity_unconsumed",
    backup_codes_table.c.identity_id,
    backup_codes_table.c.consumed,
)

# ============================================================================
# MIGRATION RECORDS TABLE
# ============================================================================
migration_records_table = Table(
    "migration_records",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("external_provider_ref", String(255), nullable=False),
    Column("outcome", String(20), nullable=False, server_default="completed"),
    Column(
        "migrated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("identity_id", name="uq_migration_record_identity"),
)
