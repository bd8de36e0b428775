"""seed_contents

Revision ID: 9e41b7c2d5f8
Revises: 3c9d1f0a7b21
Create Date: 2025-11-02 10:31:07.551920

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9e41b7c2d5f8"
down_revision: Union[str, Sequence[str], None] = "3c9d1f0a7b21"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (term, definition, example, submitted_by)
SEED_CONTENTS = [
    (
        "Simp",
        "Someone who does way too much for someone they like",
        "He bought her three Roblox skins, such a simp",
        "Luna",
    ),
    (
        "Sus",
        "Suspicious or shady; often from Among Us game slang",
        "Red is acting kinda sus in this round",
        "Kai",
    ),
    (
        "Drip",
        "Cool style or outfit",
        "Check out his drip, those sneakers are fire",
        "Mila",
    ),
    (
        "FYP",
        "For You Page - the TikTok feed curated for you",
        "That dance went viral on my FYP",
        "Leo",
    ),
    (
        "Yeet",
        "To throw something with excitement or force, or as an exclamation",
        "He yeeted the ball across the field",
        "Sofia",
    ),
]


def upgrade() -> None:
    """Seed starter terms into the moderation queue."""
    contents_table = sa.table(
        "contents",
        sa.column("term", sa.String),
        sa.column("definition", sa.String),
        sa.column("example", sa.String),
        sa.column("status", sa.String),
        sa.column("submitted_by", sa.String),
    )

    op.bulk_insert(
        contents_table,
        [
            {
                "term": term,
                "definition": definition,
                "example": example,
                "status": "PENDING",
                "submitted_by": submitted_by,
            }
            for term, definition, example, submitted_by in SEED_CONTENTS
        ],
    )


def downgrade() -> None:
    """Remove seeded terms that are still pending."""
    terms = ", ".join(f"'{term}'" for term, _, _, _ in SEED_CONTENTS)
    op.execute(
        f"DELETE FROM contents WHERE status = 'PENDING' AND term IN ({terms})"
    )
