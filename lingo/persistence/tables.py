"""SQLAlchemy table definitions for Lingo.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),  # Subject from the identity provider
    Column("email", String(255), nullable=False),
    Column("display_name", String(100), nullable=True),
    Column("role", String(20), nullable=False, server_default="LEARNER"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "role IN ('LEARNER', 'CONTRIBUTOR', 'MODERATOR', 'ADMIN')",
        name="ck_users_role",
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# CONTENTS TABLE
# ============================================================================
contents_table = Table(
    "contents",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("term", String(100), nullable=False),
    Column("definition", String(500), nullable=False),
    Column("example", String(500), nullable=True),
    Column("status", String(20), nullable=False, server_default="PENDING"),
    Column("submitted_by", String(100), nullable=False),
    Column("reviewed_by", String(100), nullable=True),
    Column("review_comment", String(500), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('PENDING', 'APPROVED', 'REJECTED')", name="ck_contents_status"
    ),
    CheckConstraint(
        "status = 'PENDING' OR reviewed_by IS NOT NULL",
        name="ck_contents_reviewed_by",
    ),
)

# Pending queue reads filter on status and walk created_at, id in order
Index(
    "idx_contents_status_created",
    contents_table.c.status,
    contents_table.c.created_at,
    contents_table.c.id,
)

# ============================================================================
# CONTENT VOTES TABLE
# ============================================================================
content_votes_table = Table(
    "content_votes",
    metadata,
    Column(
        "content_id",
        BigInteger,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column("vote_type", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("content_id", "user_id", name="pk_content_votes"),
    CheckConstraint(
        "vote_type IN ('THUMBS_UP', 'THUMBS_DOWN')", name="ck_content_votes_type"
    ),
)

Index("idx_content_votes_user", content_votes_table.c.user_id)
