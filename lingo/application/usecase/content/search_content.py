"""Search content use case."""

from pydantic import BaseModel, Field

from lingo.domain.service import ContentService

from .common import ContentItem


class SearchContentRequest(BaseModel):
    """Search content request."""

    query: str = Field(default="", max_length=100)


class SearchContentResponse(BaseModel):
    """Search content response."""

    query: str
    contents: list[ContentItem]


class SearchContentUseCase:
    """Use case for searching the approved dictionary.

    Matches a case-insensitive substring of the term, definition or example.
    """

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: SearchContentRequest) -> SearchContentResponse:
        """Execute search flow.

        Args:
            request: Search request; a blank query lists every approved item

        Returns:
            Matching approved items in ID order
        """
        contents = await self.content_service.search_approved(request.query)
        return SearchContentResponse(
            query=request.query.strip(),
            contents=[ContentItem.from_content(c) for c in contents],
        )
