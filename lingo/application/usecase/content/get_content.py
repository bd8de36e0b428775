"""Get content use case."""

from pydantic import BaseModel

from lingo.domain.service import ContentService
from lingo.domain.value import ContentId

from .common import ContentItem


class GetContentRequest(BaseModel):
    """Get content request."""

    content_id: int
    viewer: str  # Email of the authenticated caller
    viewer_can_moderate: bool = False


class GetContentResponse(ContentItem):
    """Get content response."""

    pass


class GetContentUseCase:
    """Use case for fetching a single content item by ID."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: GetContentRequest) -> GetContentResponse:
        """Execute get content flow.

        Pending and rejected items are only returned to moderators and to
        the user who submitted them.

        Raises:
            NotFoundError: If content not found or hidden from the viewer
        """
        content = await self.content_service.get_visible(
            ContentId(request.content_id),
            viewer=request.viewer,
            can_moderate=request.viewer_can_moderate,
        )
        return GetContentResponse.from_content(content)
