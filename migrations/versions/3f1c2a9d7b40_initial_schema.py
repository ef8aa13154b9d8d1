"""initial_schema

Create the TyrantCam schema:
- Admin users (email/password administrators)
- Tyrants (published or draft entries with a denormalized shame_count)
- Submissions (public reports awaiting moderation)
- Votes (one per tyrant per visitor fingerprint)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE tyrant_category AS ENUM ('federal', 'state', 'local', 'law_enforcement');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE submission_status AS ENUM ('pending', 'approved', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # ADMIN_USERS table
    # ========================================================================
    op.create_table(
        "admin_users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="admin_users_email_key"),
    )
    op.create_index("idx_admin_users_email", "admin_users", ["email"])

    # ========================================================================
    # TYRANTS table
    # ========================================================================
    op.create_table(
        "tyrants",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("position", sa.Text(), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(
                "federal",
                "state",
                "local",
                "law_enforcement",
                name="tyrant_category",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column(
            "evidence_urls",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "shame_count", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column(
            "is_published",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(name) >= 2", name="tyrants_name_check"),
        sa.CheckConstraint(
            "char_length(description) >= 10", name="tyrants_description_check"
        ),
        sa.CheckConstraint(
            "shame_count >= 0", name="tyrants_shame_count_non_negative"
        ),
    )
    op.create_index("idx_tyrants_category", "tyrants", ["category"])
    op.create_index("idx_tyrants_is_published", "tyrants", ["is_published"])
    op.create_index(
        "idx_tyrants_shame_count", "tyrants", [sa.text("shame_count DESC")]
    )
    op.create_index("idx_tyrants_created_at", "tyrants", [sa.text("created_at DESC")])

    # ========================================================================
    # SUBMISSIONS table
    # ========================================================================
    op.create_table(
        "submissions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("tyrant_name", sa.Text(), nullable=False),
        sa.Column("tyrant_title", sa.Text(), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(name="tyrant_category", create_type=False),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "evidence_files",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("reporter_contact", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "approved",
                "rejected",
                name="submission_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column(
            "submitted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("reviewed_by", sa.UUID(), nullable=True),
        sa.Column("tyrant_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(
            ["reviewed_by"], ["admin_users.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["tyrant_id"], ["tyrants.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(description) >= 20", name="submissions_description_check"
        ),
    )
    op.create_index("idx_submissions_status", "submissions", ["status"])
    op.create_index("idx_submissions_category", "submissions", ["category"])
    op.create_index(
        "idx_submissions_submitted_at", "submissions", [sa.text("submitted_at DESC")]
    )
    op.create_index("idx_submissions_reviewed_by", "submissions", ["reviewed_by"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("tyrant_id", sa.UUID(), nullable=False),
        sa.Column("fingerprint", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["tyrant_id"], ["tyrants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(fingerprint) = 64", name="votes_fingerprint_check"
        ),
    )
    op.create_index("idx_votes_tyrant_id", "votes", ["tyrant_id"])
    op.create_index("idx_votes_fingerprint", "votes", ["fingerprint"])
    op.create_index("idx_votes_created_at", "votes", ["created_at"])
    # One vote per visitor per tyrant, forever
    op.create_index(
        "idx_votes_tyrant_fingerprint_unique",
        "votes",
        ["tyrant_id", "fingerprint"],
        unique=True,
    )

    # ========================================================================
    # TRIGGERS
    # ========================================================================

    # Trigger function to update updated_at timestamp
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_tyrants_updated_at
        BEFORE UPDATE ON tyrants
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS update_tyrants_updated_at ON tyrants")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    op.drop_table("votes")
    op.drop_table("submissions")
    op.drop_table("tyrants")
    op.drop_table("admin_users")

    op.execute("DROP TYPE IF EXISTS submission_status")
    op.execute("DROP TYPE IF EXISTS tyrant_category")
