"""In-memory content repository for testing."""

from datetime import datetime
from typing import List, Optional

from lingo.domain.model.content import Content
from lingo.domain.repository.content import ContentRepository
from lingo.domain.value import ContentId, ContentStatus, ReviewDecision


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing.

    IDs are assigned sequentially from 1, like the database identity column.
    """

    def __init__(self) -> None:
        self._contents: dict[ContentId, Content] = {}
        self._next_id = 1

    async def create(
        self,
        term: str,
        definition: str,
        example: Optional[str],
        submitted_by: str,
        created_at: datetime,
    ) -> Content:
        """Store a new PENDING item."""
        content = Content(
            id=ContentId(self._next_id),
            term=term,
            definition=definition,
            example=example,
            status=ContentStatus.PENDING,
            submitted_by=submitted_by,
            created_at=created_at,
            updated_at=created_at,
        )
        self._contents[content.id] = content
        self._next_id += 1
        return content

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find content by ID."""
        return self._contents.get(content_id)

    async def find_by_status(self, status: ContentStatus) -> List[Content]:
        """Find all content with a status."""
        if status is ContentStatus.PENDING:
            return self._pending()
        return sorted(
            (c for c in self._contents.values() if c.status == status),
            key=lambda c: c.id,
        )

    async def find_pending_page(self, limit: int, offset: int) -> List[Content]:
        """Find one slice of the pending queue."""
        return self._pending()[offset : offset + limit]

    async def count_by_status(self, status: ContentStatus) -> int:
        """Count content with a status."""
        return sum(1 for c in self._contents.values() if c.status == status)

    async def find_approved_by_term(self, term: str) -> List[Content]:
        """Find approved content with an equal term, ignoring case."""
        wanted = term.strip().lower()
        return [
            c
            for c in await self.find_by_status(ContentStatus.APPROVED)
            if c.term.strip().lower() == wanted
        ]

    async def search_approved(self, query: str) -> List[Content]:
        """Find approved content containing query, ignoring case."""
        needle = query.strip().lower()
        return [
            c
            for c in await self.find_by_status(ContentStatus.APPROVED)
            if needle in c.term.lower()
            or needle in c.definition.lower()
            or (c.example is not None and needle in c.example.lower())
        ]

    async def review_if_pending(
        self,
        content_id: ContentId,
        decision: ReviewDecision,
        reviewer: str,
        comment: Optional[str],
        reviewed_at: datetime,
    ) -> Optional[Content]:
        """Apply a decision if the item exists and is still PENDING."""
        content = self._contents.get(content_id)
        if not content or content.status != ContentStatus.PENDING:
            return None

        reviewed = content.reviewed(decision, reviewer, comment, reviewed_at)
        self._contents[content_id] = reviewed
        return reviewed

    def _pending(self) -> List[Content]:
        return sorted(
            (c for c in self._contents.values() if c.status == ContentStatus.PENDING),
            key=lambda c: (c.created_at, c.id),
        )
