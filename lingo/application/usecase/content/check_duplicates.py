"""Check duplicate term use case."""

from pydantic import BaseModel

from lingo.domain.service import ContentService

from .common import ContentItem


class CheckDuplicatesRequest(BaseModel):
    """Check duplicates request."""

    term: str


class CheckDuplicatesResponse(BaseModel):
    """Check duplicates response.

    Advisory: the client may still submit when exists is true.
    """

    term: str
    exists: bool
    matches: list[ContentItem]


class CheckDuplicatesUseCase:
    """Use case for checking whether a term is already in the dictionary."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: CheckDuplicatesRequest) -> CheckDuplicatesResponse:
        """Execute duplicate check.

        Args:
            request: Term to check (case and surrounding whitespace ignored)

        Returns:
            Approved items with the same term
        """
        matches = await self.content_service.find_existing_approved(request.term)
        return CheckDuplicatesResponse(
            term=request.term.strip(),
            exists=bool(matches),
            matches=[ContentItem.from_content(c) for c in matches],
        )
