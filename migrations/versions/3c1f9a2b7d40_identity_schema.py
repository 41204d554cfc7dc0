"""identity_schema

Create the schema of the Jolt identity service:
- Identities (anonymous or registered, case-insensitive unique handles)
- Backup codes (one batch of 8 per identity, hashed, single use)
- Migration records (audit of anonymous -> registered conversions)

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-18 09:12:44.531208

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE identity_kind AS ENUM ('anonymous', 'registered');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE identity_role AS ENUM ('member', 'moderator', 'strategist', 'admin');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # IDENTITIES table
    # ========================================================================
    op.create_table(
        "identities",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("handle", sa.String(20), nullable=False),
        sa.Column("handle_key", sa.String(80), nullable=False),  # casefold(handle)
        sa.Column(
            "kind",
            postgresql.ENUM(
                "anonymous", "registered", name="identity_kind", create_type=False
            ),
            nullable=False,
            server_default="anonymous",
        ),
        sa.Column(
            "role",
            postgresql.ENUM(
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
        sa.Column("region", sa.String(100), nullable=True),
        sa.Column("external_provider_ref", sa.String(255), nullable=True),
        sa.Column("secret_key_hash", sa.Text(), nullable=True),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("switch_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("last_auth_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("handle_key", name="uq_identities_handle_key"),
        sa.UniqueConstraint(
            "external_provider_ref", name="uq_identities_provider_ref"
        ),
        sa.CheckConstraint(
            "(kind = 'registered') = (external_provider_ref IS NOT NULL)",
            name="registered_has_provider_ref",
        ),
        sa.CheckConstraint("points >= 0", name="points_non_negative"),
        sa.CheckConstraint("level >= 0", name="level_non_negative"),
        sa.CheckConstraint("switch_count >= 0", name="switch_count_non_negative"),
    )

    # ========================================================================
    # BACKUP_CODES table
    # ========================================================================
    op.create_table(
        "backup_codes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("slot", sa.Integer(), nullable=False),
        sa.Column("code_hash", sa.Text(), nullable=False),
        sa.Column("display_code", sa.String(8), nullable=True),
        sa.Column("consumed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("consumed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("consumed_for", sa.String(50), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["identity_id"], ["identities.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("identity_id", "slot", name="uq_backup_code_slot"),
        sa.CheckConstraint("slot >= 0", name="slot_non_negative"),
    )
    op.create_index(
        "idx_backup_codes_identity_unconsumed",
        "backup_codes",
        ["identity_id", "consumed"],
    )

    # ========================================================================
    # MIGRATION_RECORDS table
    # ========================================================================
    op.create_table(
        "migration_records",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("external_provider_ref", sa.String(255), nullable=False),
        sa.Column(
            "outcome", sa.String(20), nullable=False, server_default="completed"
        ),
        sa.Column(
            "migrated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["identity_id"], ["identities.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("identity_id", name="uq_migration_record_identity"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("migration_records")
    op.drop_index("idx_backup_codes_identity_unconsumed", table_name="backup_codes")
    op.drop_table("backup_codes")
    op.drop_table("identities")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS identity_role")
    op.execute("DROP TYPE IF EXISTS identity_kind")
