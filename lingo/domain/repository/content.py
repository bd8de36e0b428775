"""Content repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from lingo.domain.model.content import Content
from lingo.domain.value import ContentId, ContentStatus, ReviewDecision


class ContentRepository(ABC):
    """Repository for Content aggregate.

    Defines the contract for content persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(
        self,
        term: str,
        definition: str,
        example: Optional[str],
        submitted_by: str,
        created_at: datetime,
    ) -> Content:
        """Insert a new PENDING content item.

        Args:
            term: Trimmed term
            definition: Trimmed definition
            example: Trimmed example or None
            submitted_by: Submitter identity
            created_at: Creation timestamp (also used as updated_at)

        Returns:
            The stored content with its assigned ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find a content item by ID.

        Args:
            content_id: The content's unique identifier

        Returns:
            The content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: ContentStatus) -> List[Content]:
        """Find all content with a status.

        APPROVED and REJECTED items are returned in ID order; PENDING items
        oldest first (created_at, then ID).

        Args:
            status: Status to filter on

        Returns:
            Matching content items
        """
        pass

    @abstractmethod
    async def find_pending_page(self, limit: int, offset: int) -> List[Content]:
        """Find a slice of the pending queue.

        Ordered by created_at ascending with ID as tie-breaker, so pages taken
        at the same point in time never overlap or skip items.

        Args:
            limit: Maximum number of items to return
            offset: Number of items to skip

        Returns:
            Pending content items for the slice
        """
        pass

    @abstractmethod
    async def count_by_status(self, status: ContentStatus) -> int:
        """Count content items with a status.

        Args:
            status: Status to filter on

        Returns:
            Number of matching items
        """
        pass

    @abstractmethod
    async def find_approved_by_term(self, term: str) -> List[Content]:
        """Find APPROVED content whose term equals the given term.

        Comparison ignores case and surrounding whitespace on both sides.

        Args:
            term: Trimmed term to look up

        Returns:
            Matching approved content items
        """
        pass

    @abstractmethod
    async def search_approved(self, query: str) -> List[Content]:
        """Find APPROVED content containing the query.

        Case-insensitive substring match over term, definition and example.

        Args:
            query: Trimmed search text

        Returns:
            Matching approved content items in ID order
        """
        pass

    @abstractmethod
    async def review_if_pending(
        self,
        content_id: ContentId,
        decision: ReviewDecision,
        reviewer: str,
        comment: Optional[str],
        reviewed_at: datetime,
    ) -> Optional[Content]:
        """Apply a review decision only if the item is still PENDING.

        The status check and the write are a single atomic operation, so two
        moderators can never both review the same item.

        Args:
            content_id: The content ID
            decision: Approve or reject
            reviewer: Reviewer identity
            comment: Optional review comment
            reviewed_at: Timestamp recorded as updated_at

        Returns:
            Updated content, or None if the item is missing or not PENDING
        """
        pass
