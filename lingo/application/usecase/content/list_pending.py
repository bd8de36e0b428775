"""List pending content use cases."""

import logfire
from pydantic import BaseModel

from lingo.domain.service import ContentService, ReviewService

from .common import ContentItem


class ListPendingResponse(BaseModel):
    """Full pending queue response."""

    contents: list[ContentItem]


class ListPendingUseCase:
    """Use case for listing the whole pending queue, oldest first."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self) -> ListPendingResponse:
        """Execute list pending flow."""
        contents = await self.content_service.list_pending()
        return ListPendingResponse(
            contents=[ContentItem.from_content(c) for c in contents]
        )


class ListPendingPageRequest(BaseModel):
    """Pending page request.

    Bounds are enforced by the domain so out-of-range values map to the
    same ValidationError as every other input error.
    """

    page: int = 0
    size: int | None = None  # Defaults to content.default_page_size


class ListPendingPageResponse(BaseModel):
    """Pending page response."""

    content: list[ContentItem]
    total_elements: int
    total_pages: int
    current_page: int
    page_size: int


class ListPendingPageUseCase:
    """Use case for paging through the moderation queue."""

    def __init__(
        self, review_service: ReviewService, content_service: ContentService
    ) -> None:
        """Initialize list pending page use case.

        Args:
            review_service: Review queue domain service
            content_service: Content domain service (for paging defaults)
        """
        self.review_service = review_service
        self.content_service = content_service

    async def execute(self, request: ListPendingPageRequest) -> ListPendingPageResponse:
        """Execute pending page flow.

        Args:
            request: Zero-based page and requested size

        Returns:
            One page of pending items with totals

        Raises:
            ValidationError: If page or size is negative
        """
        size = (
            request.size
            if request.size is not None
            else self.content_service.content_settings.default_page_size
        )

        with logfire.span("list_pending_page.execute", page=request.page, size=size):
            page = await self.review_service.get_pending_page(request.page, size)
            return ListPendingPageResponse(
                content=[ContentItem.from_content(c) for c in page.content],
                total_elements=page.total_elements,
                total_pages=page.total_pages,
                current_page=page.current_page,
                page_size=page.page_size,
            )
