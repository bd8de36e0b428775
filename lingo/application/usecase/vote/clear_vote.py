"""Clear vote use case."""

from uuid import UUID

from pydantic import BaseModel

from lingo.domain.service import VoteService
from lingo.domain.value import ContentId, UserId

from .common import VoteSummary


class ClearVoteRequest(BaseModel):
    """Clear vote request."""

    content_id: int
    user_id: str  # User ID from authenticated user


class ClearVoteResponse(VoteSummary):
    """Clear vote response: the tally after removal."""

    pass


class ClearVoteUseCase:
    """Use case for withdrawing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: ClearVoteRequest) -> ClearVoteResponse:
        """Execute clear vote flow; succeeds even if there was no vote.

        Raises:
            NotFoundError: If content not found
        """
        tally = await self.vote_service.clear(
            ContentId(request.content_id), UserId(UUID(request.user_id))
        )
        return ClearVoteResponse.from_tally(tally)
