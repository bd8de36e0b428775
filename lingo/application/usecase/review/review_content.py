"""Review content use case."""

import logfire
from pydantic import BaseModel

from lingo.domain.error import ValidationError
from lingo.domain.service import ReviewService
from lingo.domain.value import ContentId, ReviewDecision

from ..content.common import ContentItem


class ReviewContentRequest(BaseModel):
    """Review content request.

    decision is kept as raw text so that APPROVED/REJECTED aliases and
    unknown values are handled by the domain parser.
    """

    content_id: int
    decision: str
    comment: str | None = None
    reviewer: str  # Email of the authenticated moderator


class ReviewContentResponse(ContentItem):
    """Review content response (the reviewed item)."""

    pass


class ReviewContentUseCase:
    """Use case for approving or rejecting a pending item."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize review content use case.

        Args:
            review_service: Review queue domain service
        """
        self.review_service = review_service

    async def execute(self, request: ReviewContentRequest) -> ReviewContentResponse:
        """Execute review flow.

        Steps:
        1. Parse the decision
        2. Require a comment when rejecting
        3. Apply the decision atomically

        Args:
            request: Review request

        Returns:
            The reviewed content

        Raises:
            ValidationError: If decision is unknown or a rejection has no comment
            NotFoundError: If content not found
            InvalidStateError: If the content was already reviewed
        """
        decision = ReviewDecision.parse(request.decision)
        comment = request.comment.strip() if request.comment else None

        if decision is ReviewDecision.REJECT and not comment:
            raise ValidationError("comment is required when rejecting", field="comment")

        with logfire.span(
            "review_content.execute",
            content_id=request.content_id,
            decision=decision.value,
        ):
            content = await self.review_service.decide(
                ContentId(request.content_id),
                decision,
                reviewer=request.reviewer,
                comment=comment,
            )
            return ReviewContentResponse.from_content(content)
