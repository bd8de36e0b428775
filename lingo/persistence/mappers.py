"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from lingo.domain.model import Content, ContentVote, User
from lingo.domain.value import (
    ContentId,
    ContentStatus,
    UserId,
    UserRole,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        display_name=row.get("display_name"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_content(row: Dict[str, Any]) -> Content:
    """Convert database row to Content domain model."""
    return Content(
        id=ContentId(row["id"]),
        term=row["term"],
        definition=row["definition"],
        example=row.get("example"),
        status=ContentStatus(row["status"]),
        submitted_by=row["submitted_by"],
        reviewed_by=row.get("reviewed_by"),
        review_comment=row.get("review_comment"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_vote(row: Dict[str, Any]) -> ContentVote:
    """Convert database row to ContentVote domain model."""
    return ContentVote(
        content_id=ContentId(row["content_id"]),
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
