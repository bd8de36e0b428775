"""Domain value objects for Lingo."""

from lingo.domain.value.identifiers import ContentId, UserId
from lingo.domain.value.types import (
    ContentStatus,
    ReviewDecision,
    UserRole,
    VoteType,
)

__all__ = [
    # Identifiers
    "ContentId",
    "UserId",
    # Types
    "ContentStatus",
    "ReviewDecision",
    "UserRole",
    "VoteType",
]
