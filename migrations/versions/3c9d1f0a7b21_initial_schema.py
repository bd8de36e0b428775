"""initial_schema

Create the schema for Lingo:
- Users (local record of identities issued by the identity provider)
- Contents (submitted slang terms with their review state)
- Content votes (one thumbs-up or thumbs-down per user per term)

Revision ID: 3c9d1f0a7b21
Revises:
Create Date: 2025-11-02 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9d1f0a7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),  # Token subject
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="LEARNER"),
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
        sa.CheckConstraint(
            "role IN ('LEARNER', 'CONTRIBUTOR', 'MODERATOR', 'ADMIN')",
            name="ck_users_role",
        ),
    )
    op.create_index("idx_users_email", "users", ["email"])

    # ========================================================================
    # CONTENTS table
    # ========================================================================
    op.create_table(
        "contents",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("term", sa.String(100), nullable=False),
        sa.Column("definition", sa.String(500), nullable=False),
        sa.Column("example", sa.String(500), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("submitted_by", sa.String(100), nullable=False),
        sa.Column("reviewed_by", sa.String(100), nullable=True),
        sa.Column("review_comment", sa.String(500), nullable=True),
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
        sa.CheckConstraint(
            "status IN ('PENDING', 'APPROVED', 'REJECTED')",
            name="ck_contents_status",
        ),
        sa.CheckConstraint(
            "status = 'PENDING' OR reviewed_by IS NOT NULL",
            name="ck_contents_reviewed_by",
        ),
    )
    # Pending queue: WHERE status = 'PENDING' ORDER BY created_at, id
    op.create_index(
        "idx_contents_status_created",
        "contents",
        ["status", "created_at", "id"],
    )
    # Duplicate check compares trimmed, lower-cased terms
    op.execute(
        "CREATE INDEX idx_contents_term_lower ON contents (LOWER(TRIM(term)))"
    )

    # ========================================================================
    # CONTENT_VOTES table
    # ========================================================================
    op.create_table(
        "content_votes",
        sa.Column("content_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("vote_type", sa.String(20), nullable=False),
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
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("content_id", "user_id", name="pk_content_votes"),
        sa.CheckConstraint(
            "vote_type IN ('THUMBS_UP', 'THUMBS_DOWN')",
            name="ck_content_votes_type",
        ),
    )
    op.create_index("idx_content_votes_user", "content_votes", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_content_votes_user", table_name="content_votes")
    op.drop_table("content_votes")

    op.execute("DROP INDEX IF EXISTS idx_contents_term_lower")
    op.drop_index("idx_contents_status_created", table_name="contents")
    op.drop_table("contents")

    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
