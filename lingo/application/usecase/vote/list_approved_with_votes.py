"""List approved content with votes use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from lingo.domain.service import VoteService
from lingo.domain.value import UserId, VoteType

from ..content.common import ContentItem


class ContentWithVotesItem(BaseModel):
    """Approved item with its vote counts."""

    content: ContentItem
    thumbs_up: int
    thumbs_down: int
    user_vote: VoteType | None


class ListApprovedWithVotesRequest(BaseModel):
    """List approved with votes request."""

    user_id: str | None = None  # Current user ID (if authenticated)


class ListApprovedWithVotesResponse(BaseModel):
    """List approved with votes response."""

    contents: list[ContentWithVotesItem]


class ListApprovedWithVotesUseCase:
    """Use case for the dictionary view with thumbs counts."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: ListApprovedWithVotesRequest
    ) -> ListApprovedWithVotesResponse:
        """Execute list flow.

        Counts for every item come from one grouped query, so the cost does
        not grow with the number of items.
        """
        voter_id = UserId(UUID(request.user_id)) if request.user_id else None

        with logfire.span("list_approved_with_votes.execute"):
            items = await self.vote_service.list_approved_with_votes(voter_id)
            return ListApprovedWithVotesResponse(
                contents=[
                    ContentWithVotesItem(
                        content=ContentItem.from_content(item.content),
                        thumbs_up=item.thumbs_up,
                        thumbs_down=item.thumbs_down,
                        user_vote=item.user_vote,
                    )
                    for item in items
                ]
            )
