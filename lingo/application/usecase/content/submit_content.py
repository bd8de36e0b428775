"""Submit content use case."""

import logfire
from pydantic import BaseModel

from lingo.domain.service import ContentService

from .common import ContentItem


class SubmitContentRequest(BaseModel):
    """Submit content request."""

    term: str
    definition: str
    example: str | None = None
    submitted_by: str  # Email of the authenticated contributor


class SubmitContentResponse(ContentItem):
    """Submit content response (the created PENDING item)."""

    pass


class SubmitContentUseCase:
    """Use case for submitting a new term for review."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize submit content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: SubmitContentRequest) -> SubmitContentResponse:
        """Execute submit content flow.

        Args:
            request: Submit content request

        Returns:
            The created content

        Raises:
            ValidationError: If a field is blank or too long
        """
        with logfire.span("submit_content.execute", submitted_by=request.submitted_by):
            content = await self.content_service.submit(
                term=request.term,
                definition=request.definition,
                example=request.example,
                submitted_by=request.submitted_by,
            )
            return SubmitContentResponse.from_content(content)
