"""Response models shared by content use cases."""

from datetime import datetime

from pydantic import BaseModel

from lingo.domain.model import Content
from lingo.domain.value import ContentStatus


class ContentItem(BaseModel):
    """Content item in responses."""

    id: int
    term: str
    definition: str
    example: str | None
    status: ContentStatus
    submitted_by: str
    reviewed_by: str | None
    review_comment: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_content(cls, content: Content) -> "ContentItem":
        """Build a response item from a domain model."""
        return cls(
            id=content.id,
            term=content.term,
            definition=content.definition,
            example=content.example,
            status=content.status,
            submitted_by=content.submitted_by,
            reviewed_by=content.reviewed_by,
            review_comment=content.review_comment,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )
