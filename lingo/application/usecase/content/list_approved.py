"""List approved content use case."""

from pydantic import BaseModel

from lingo.domain.service import ContentService

from .common import ContentItem


class ListApprovedResponse(BaseModel):
    """List approved content response."""

    contents: list[ContentItem]


class ListApprovedUseCase:
    """Use case for listing the public dictionary."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self) -> ListApprovedResponse:
        """Execute list approved flow.

        Returns:
            Every approved item in ID order
        """
        contents = await self.content_service.list_approved()
        return ListApprovedResponse(
            contents=[ContentItem.from_content(c) for c in contents]
        )
