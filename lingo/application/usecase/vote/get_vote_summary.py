"""Get vote summary use case."""

from uuid import UUID

from pydantic import BaseModel

from lingo.domain.service import VoteService
from lingo.domain.value import ContentId, UserId

from .common import VoteSummary


class GetVoteSummaryRequest(BaseModel):
    """Get vote summary request."""

    content_id: int
    user_id: str | None = None  # Viewer whose vote is reported, if any


class GetVoteSummaryResponse(VoteSummary):
    """Get vote summary response."""

    pass


class GetVoteSummaryUseCase:
    """Use case for reading the vote counts of one item."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteSummaryRequest) -> GetVoteSummaryResponse:
        """Execute vote summary flow.

        Raises:
            NotFoundError: If content not found
        """
        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
        tally = await self.vote_service.tally(ContentId(request.content_id), viewer_id)
        return GetVoteSummaryResponse.from_tally(tally)
