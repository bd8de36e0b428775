"""Content domain service.

Owns the content status state machine:

    PENDING --approve--> APPROVED
    PENDING --reject---> REJECTED

Both targets are terminal. There is no edit or delete transition.
"""

from datetime import datetime, timezone
from typing import Optional

import logfire

from lingo.config import ContentSettings
from lingo.domain.error import InvalidStateError, NotFoundError, ValidationError
from lingo.domain.model.content import (
    DEFINITION_MAX_LENGTH,
    EXAMPLE_MAX_LENGTH,
    REVIEW_COMMENT_MAX_LENGTH,
    SUBMITTER_MAX_LENGTH,
    TERM_MAX_LENGTH,
    Content,
)
from lingo.domain.model.tally import ContentPage
from lingo.domain.repository import ContentRepository
from lingo.domain.value import ContentId, ContentStatus, ReviewDecision
from lingo.util.retry import ReadRetry

from .base import Service


def _clean(
    value: Optional[str], field: str, max_length: int, required: bool
) -> Optional[str]:
    """Trim a text field and check its length.

    Blank optional fields become None.

    Raises:
        ValidationError: If a required field is blank or any field is too long
    """
    cleaned = value.strip() if value is not None else ""
    if not cleaned:
        if required:
            raise ValidationError(f"{field} must not be blank", field=field)
        return None
    if len(cleaned) > max_length:
        raise ValidationError(
            f"{field} must be at most {max_length} characters", field=field
        )
    return cleaned


class ContentService(Service):
    """Domain service for content submission and moderation."""

    def __init__(
        self,
        content_repository: ContentRepository,
        content_settings: ContentSettings,
        read_retry: ReadRetry,
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
            content_settings: Paging configuration
            read_retry: Retry policy applied to reads only
        """
        self.content_repository = content_repository
        self.content_settings = content_settings
        self.read_retry = read_retry

    async def submit(
        self,
        term: str,
        definition: str,
        example: Optional[str],
        submitted_by: str,
    ) -> Content:
        """Submit a new term for review.

        Args:
            term: Slang term (1-100 chars after trimming)
            definition: Definition (1-500 chars after trimming)
            example: Optional usage example (at most 500 chars)
            submitted_by: Submitter identity

        Returns:
            The created content, status PENDING

        Raises:
            ValidationError: If a field is blank or too long
        """
        clean_term = _clean(term, "term", TERM_MAX_LENGTH, required=True)
        clean_definition = _clean(
            definition, "definition", DEFINITION_MAX_LENGTH, required=True
        )
        clean_example = _clean(example, "example", EXAMPLE_MAX_LENGTH, required=False)
        submitter = _clean(
            submitted_by, "submitted_by", SUBMITTER_MAX_LENGTH, required=True
        )

        with logfire.span(
            "content_service.submit", term=clean_term, submitted_by=submitter
        ):
            content = await self.content_repository.create(
                term=clean_term,  # type: ignore[arg-type]
                definition=clean_definition,  # type: ignore[arg-type]
                example=clean_example,
                submitted_by=submitter,  # type: ignore[arg-type]
                created_at=datetime.now(timezone.utc),
            )
            logfire.info(
                "Content submitted", content_id=content.id, term=content.term
            )
            return content

    async def review(
        self,
        content_id: ContentId,
        decision: ReviewDecision,
        reviewer: str,
        comment: Optional[str] = None,
    ) -> Content:
        """Apply a review decision to a pending item.

        The PENDING check and the status write happen in one conditional
        update; when it matches nothing the item is re-read only to choose
        the right error.

        Args:
            content_id: Content ID
            decision: Approve or reject
            reviewer: Reviewer identity
            comment: Optional review comment

        Returns:
            The reviewed content

        Raises:
            ValidationError: If reviewer is blank or comment too long
            NotFoundError: If the content does not exist
            InvalidStateError: If the content was already reviewed
        """
        clean_reviewer = _clean(
            reviewer, "reviewer", SUBMITTER_MAX_LENGTH, required=True
        )
        clean_comment = _clean(
            comment, "review_comment", REVIEW_COMMENT_MAX_LENGTH, required=False
        )

        with logfire.span(
            "content_service.review",
            content_id=content_id,
            decision=decision.value,
            reviewer=clean_reviewer,
        ):
            reviewed = await self.content_repository.review_if_pending(
                content_id=content_id,
                decision=decision,
                reviewer=clean_reviewer,  # type: ignore[arg-type]
                comment=clean_comment,
                reviewed_at=datetime.now(timezone.utc),
            )
            if reviewed:
                logfire.info(
                    "Content reviewed",
                    content_id=content_id,
                    status=reviewed.status.value,
                )
                return reviewed

            existing = await self.content_repository.find_by_id(content_id)
            if not existing:
                logfire.warn("Review of non-existent content", content_id=content_id)
                raise NotFoundError("Content", str(content_id))

            logfire.warn(
                "Review of already reviewed content",
                content_id=content_id,
                status=existing.status.value,
            )
            raise InvalidStateError(
                f"Content {content_id} already reviewed ({existing.status.value})"
            )

    async def get_by_id(self, content_id: ContentId) -> Content:
        """Get content by ID.

        Raises:
            NotFoundError: If content not found
        """
        with logfire.span("content_service.get_by_id", content_id=content_id):
            content = await self.read_retry(
                "get_by_id", lambda: self.content_repository.find_by_id(content_id)
            )
            if not content:
                logfire.warn("Content not found", content_id=content_id)
                raise NotFoundError("Content", str(content_id))
            return content

    async def get_visible(
        self, content_id: ContentId, viewer: str, can_moderate: bool = False
    ) -> Content:
        """Get content by ID as seen by one viewer.

        Approved items are visible to everyone. Pending and rejected items
        are visible only to moderators and to their submitter; anyone else
        gets NotFoundError so hidden IDs cannot be told apart from missing
        ones.

        Args:
            content_id: Content to load
            viewer: Email of the authenticated caller
            can_moderate: Whether the caller may see the review queue

        Raises:
            NotFoundError: If content not found or not visible to the viewer
        """
        content = await self.get_by_id(content_id)
        if (
            content.status is ContentStatus.APPROVED
            or can_moderate
            or content.submitted_by.strip().lower() == viewer.strip().lower()
        ):
            return content
        logfire.info(
            "Hidden content requested",
            content_id=content_id,
            status=content.status.value,
        )
        raise NotFoundError("Content", str(content_id))

    async def get_approved(self, content_id: ContentId) -> Content:
        """Get content by ID, requiring it to be APPROVED.

        Raises:
            NotFoundError: If content not found
            InvalidStateError: If content is not approved
        """
        content = await self.get_by_id(content_id)
        if content.status is not ContentStatus.APPROVED:
            raise InvalidStateError(
                f"Content {content_id} is not approved ({content.status.value})"
            )
        return content

    async def list_approved(self) -> list[Content]:
        """List all approved content in ID order."""
        with logfire.span("content_service.list_approved"):
            items = await self.read_retry(
                "list_approved",
                lambda: self.content_repository.find_by_status(ContentStatus.APPROVED),
            )
            logfire.info("Approved content listed", count=len(items))
            return items

    async def list_pending(self) -> list[Content]:
        """List the whole pending queue, oldest first."""
        with logfire.span("content_service.list_pending"):
            return await self.read_retry(
                "list_pending",
                lambda: self.content_repository.find_by_status(ContentStatus.PENDING),
            )

    def normalize_page_size(self, size: int) -> int:
        """Clamp a page size to [1, max_page_size].

        Raises:
            ValidationError: If size is negative
        """
        if size < 0:
            raise ValidationError("size must not be negative", field="size")
        return min(max(size, 1), self.content_settings.max_page_size)

    async def list_pending_page(self, page: int, size: int) -> ContentPage:
        """Get one page of the pending queue.

        Args:
            page: Zero-based page index
            size: Requested page size (clamped to [1, max_page_size])

        Returns:
            The page with total counts

        Raises:
            ValidationError: If page or size is negative, or page is past
                content.max_page
        """
        if page < 0:
            raise ValidationError("page must not be negative", field="page")
        if page > self.content_settings.max_page:
            raise ValidationError(
                f"page must not exceed {self.content_settings.max_page}", field="page"
            )
        page_size = self.normalize_page_size(size)

        with logfire.span(
            "content_service.list_pending_page", page=page, size=page_size
        ):
            total = await self.read_retry(
                "count_pending",
                lambda: self.content_repository.count_by_status(ContentStatus.PENDING),
            )
            items = await self.read_retry(
                "list_pending_page",
                lambda: self.content_repository.find_pending_page(
                    limit=page_size, offset=page * page_size
                ),
            )
            logfire.info(
                "Pending page listed", page=page, count=len(items), total=total
            )
            return ContentPage.build(items, total=total, page=page, size=page_size)

    async def find_existing_approved(self, term: str) -> list[Content]:
        """Find approved content with the same term, ignoring case.

        Advisory only: callers decide whether to go ahead with a submission.

        Args:
            term: Term to check; surrounding whitespace is ignored

        Returns:
            Approved items with an equal term, empty if none or term blank
        """
        cleaned = (term or "").strip()
        if not cleaned:
            return []

        with logfire.span("content_service.find_existing_approved", term=cleaned):
            matches = await self.read_retry(
                "find_existing_approved",
                lambda: self.content_repository.find_approved_by_term(cleaned),
            )
            logfire.info("Duplicate check", term=cleaned, matches=len(matches))
            return matches

    async def search_approved(self, query: str | None) -> list[Content]:
        """Search approved content by substring of term, definition or example.

        A blank query returns every approved item.
        """
        cleaned = (query or "").strip()
        if not cleaned:
            return await self.list_approved()

        with logfire.span("content_service.search_approved", query=cleaned):
            return await self.read_retry(
                "search_approved",
                lambda: self.content_repository.search_approved(cleaned),
            )
