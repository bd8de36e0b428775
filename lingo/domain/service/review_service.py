"""Review queue domain service."""

from typing import Optional

import logfire

from lingo.domain.model.content import Content
from lingo.domain.model.tally import ContentPage
from lingo.domain.value import ContentId, ReviewDecision

from .base import Service
from .content_service import ContentService


class ReviewService(Service):
    """Moderator-facing view of the pending queue.

    The queue is ordered by created_at ascending (ID breaks ties), so
    moderators see the same order and pages never overlap.
    """

    def __init__(self, content_service: ContentService) -> None:
        """Initialize review service.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def get_pending_page(self, page: int, size: int) -> ContentPage:
        """Get one page of the pending queue, oldest first."""
        return await self.content_service.list_pending_page(page, size)

    async def approve(
        self, content_id: ContentId, reviewer: str, comment: Optional[str] = None
    ) -> Content:
        """Approve a pending item.

        Raises:
            NotFoundError: If content not found
            InvalidStateError: If already reviewed
        """
        with logfire.span("review_service.approve", content_id=content_id):
            return await self.content_service.review(
                content_id, ReviewDecision.APPROVE, reviewer, comment
            )

    async def reject(
        self, content_id: ContentId, reviewer: str, comment: Optional[str]
    ) -> Content:
        """Reject a pending item.

        Raises:
            NotFoundError: If content not found
            InvalidStateError: If already reviewed
        """
        with logfire.span("review_service.reject", content_id=content_id):
            return await self.content_service.review(
                content_id, ReviewDecision.REJECT, reviewer, comment
            )

    async def decide(
        self,
        content_id: ContentId,
        decision: ReviewDecision,
        reviewer: str,
        comment: Optional[str] = None,
    ) -> Content:
        """Dispatch a decision to approve or reject."""
        if decision is ReviewDecision.APPROVE:
            return await self.approve(content_id, reviewer, comment)
        return await self.reject(content_id, reviewer, comment)
