"""SQLAlchemy table definitions for TyrantCam.

They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

tyrant_category = postgresql.ENUM(
    "federal",
    "state",
    "local",
    "law_enforcement",
    name="tyrant_category",
    create_type=False,
)

submission_status = postgresql.ENUM(
    "pending",
    "approved",
    "rejected",
    name="submission_status",
    create_type=False,
)

# ============================================================================
# ADMIN USERS TABLE
# ============================================================================
admin_users_table = Table(
    "admin_users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", Text, nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_admin_users_email", admin_users_table.c.email)

# ============================================================================
# TYRANTS TABLE
# ============================================================================
tyrants_table = Table(
    "tyrants",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", Text, nullable=False),
    Column("title", Text, nullable=False),
    Column("position", Text, nullable=False),
    Column("category", tyrant_category, nullable=False),
    Column("description", Text, nullable=False),
    Column("image_url", Text, nullable=True),
    Column("evidence_urls", ARRAY(Text), nullable=False, server_default="{}"),
    # Maintained only by vote inserts/deletes
    Column("shame_count", Integer, nullable=False, server_default="0"),
    Column("is_published", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(name) >= 2", name="tyrants_name_check"),
    CheckConstraint(
        "char_length(description) >= 10", name="tyrants_description_check"
    ),
    CheckConstraint("shame_count >= 0", name="tyrants_shame_count_non_negative"),
)

Index("idx_tyrants_category", tyrants_table.c.category)
Index("idx_tyrants_is_published", tyrants_table.c.is_published)
Index("idx_tyrants_shame_count", tyrants_table.c.shame_count.desc())
Index("idx_tyrants_created_at", tyrants_table.c.created_at.desc())

# ============================================================================
# SUBMISSIONS TABLE
# ============================================================================
submissions_table = Table(
    "submissions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tyrant_name", Text, nullable=False),
    Column("tyrant_title", Text, nullable=False),
    Column("category", tyrant_category, nullable=False),
    Column("description", Text, nullable=False),
    Column("evidence_files", JSONB, nullable=False, server_default="[]"),
    Column("reporter_contact", Text, nullable=True),
    Column("status", submission_status, nullable=False, server_default="pending"),
    Column("admin_notes", Text, nullable=True),
    Column(
        "submitted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "reviewed_by",
        UUID,
        ForeignKey("admin_users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "tyrant_id",
        UUID,
        ForeignKey("tyrants.id", ondelete="SET NULL"),
        nullable=True,
    ),
    CheckConstraint(
        "char_length(description) >= 20", name="submissions_description_check"
    ),
)

Index("idx_submissions_status", submissions_table.c.status)
Index("idx_submissions_category", submissions_table.c.category)
Index("idx_submissions_submitted_at", submissions_table.c.submitted_at.desc())
Index("idx_submissions_reviewed_by", submissions_table.c.reviewed_by)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "tyrant_id", UUID, ForeignKey("tyrants.id", ondelete="CASCADE"), nullable=False
    ),
    Column("fingerprint", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(fingerprint) = 64", name="votes_fingerprint_check"),
)

Index("idx_votes_tyrant_id", votes_table.c.tyrant_id)
Index("idx_votes_fingerprint", votes_table.c.fingerprint)
Index("idx_votes_created_at", votes_table.c.created_at)
# One vote per visitor per tyrant
Index(
    "idx_votes_tyrant_fingerprint_unique",
    votes_table.c.tyrant_id,
    votes_table.c.fingerprint,
    unique=True,
)
