"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from lingo.domain.service import VoteService
from lingo.domain.value import ContentId, UserId, VoteType

from .common import VoteSummary


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    content_id: int
    vote_type: str  # Parsed by VoteType.parse
    user_id: str  # User ID from authenticated user


class CastVoteResponse(VoteSummary):
    """Cast vote response: the tally after the vote."""

    pass


class CastVoteUseCase:
    """Use case for voting thumbs up or down on an approved term."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Casting the same type twice is a no-op; a different type replaces
        the previous vote.

        Raises:
            ValidationError: If vote_type is unknown
            NotFoundError: If content not found
            InvalidStateError: If content is not approved
        """
        tally = await self.vote_service.cast(
            ContentId(request.content_id),
            UserId(UUID(request.user_id)),
            VoteType.parse(request.vote_type),
        )
        return CastVoteResponse.from_tally(tally)
