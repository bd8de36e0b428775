"""Vote domain service."""

from datetime import datetime, timezone
from typing import Optional, Sequence

import logfire

from lingo.domain.model.tally import ContentWithVotes, VoteTally
from lingo.domain.repository import VoteRepository
from lingo.domain.value import ContentId, UserId, VoteType
from lingo.util.retry import ReadRetry

from .base import Service
from .content_service import ContentService


class VoteService(Service):
    """Domain service for vote operations.

    Tallies are never stored; they are counted from the votes table on
    every read.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        content_service: ContentService,
        read_retry: ReadRetry,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            content_service: Content domain service
            read_retry: Retry policy applied to reads only
        """
        self.vote_repository = vote_repository
        self.content_service = content_service
        self.read_retry = read_retry

    async def cast(
        self, content_id: ContentId, user_id: UserId, vote_type: VoteType
    ) -> VoteTally:
        """Cast or change a vote on approved content.

        Same type again is a no-op; a different type replaces the vote.

        Args:
            content_id: Content ID
            user_id: Voter ID
            vote_type: Thumbs up or down

        Returns:
            Tally after the vote, including the voter's vote

        Raises:
            NotFoundError: If content not found
            InvalidStateError: If content is not approved
        """
        with logfire.span(
            "vote_service.cast",
            content_id=content_id,
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            await self.content_service.get_approved(content_id)

            await self.vote_repository.upsert(
                content_id=content_id,
                user_id=user_id,
                vote_type=vote_type,
                voted_at=datetime.now(timezone.utc),
            )
            logfire.info(
                "Vote cast",
                content_id=content_id,
                user_id=str(user_id),
                vote_type=vote_type.value,
            )

            return await self._build_tally(content_id, user_id)

    async def clear(self, content_id: ContentId, user_id: UserId) -> VoteTally:
        """Remove a user's vote; no-op if there is none.

        Raises:
            NotFoundError: If content not found
        """
        with logfire.span(
            "vote_service.clear", content_id=content_id, user_id=str(user_id)
        ):
            await self.content_service.get_by_id(content_id)

            deleted = await self.vote_repository.delete_by_content_and_user(
                content_id, user_id
            )
            if deleted:
                logfire.info(
                    "Vote cleared", content_id=content_id, user_id=str(user_id)
                )
            else:
                logfire.info(
                    "No vote to clear", content_id=content_id, user_id=str(user_id)
                )

            return await self._build_tally(content_id, user_id)

    async def tally(
        self, content_id: ContentId, viewer_id: Optional[UserId] = None
    ) -> VoteTally:
        """Get the vote tally for one content item.

        Raises:
            NotFoundError: If content not found
        """
        with logfire.span("vote_service.tally", content_id=content_id):
            await self.content_service.get_by_id(content_id)
            return await self.read_retry(
                "tally", lambda: self._build_tally(content_id, viewer_id)
            )

    async def tally_for_set(
        self, content_ids: Sequence[ContentId], voter_id: Optional[UserId] = None
    ) -> dict[ContentId, VoteTally]:
        """Get tallies for many items with two queries in total.

        Args:
            content_ids: Content IDs
            voter_id: Viewer whose own vote should be reported (optional)

        Returns:
            Mapping of every requested ID to its tally
        """
        if not content_ids:
            return {}

        return await self.read_retry(
            "tally_for_set", lambda: self._count_tallies(content_ids, voter_id)
        )

    async def list_approved_with_votes(
        self, voter_id: Optional[UserId] = None
    ) -> list[ContentWithVotes]:
        """List approved content with tallies for the given viewer."""
        with logfire.span(
            "vote_service.list_approved_with_votes",
            voter_id=str(voter_id) if voter_id else None,
        ):
            contents = await self.content_service.list_approved()
            tallies = await self.tally_for_set([c.id for c in contents], voter_id)

            return [
                ContentWithVotes(
                    content=content,
                    thumbs_up=tallies[content.id].thumbs_up,
                    thumbs_down=tallies[content.id].thumbs_down,
                    user_vote=tallies[content.id].user_vote,
                )
                for content in contents
            ]

    async def _count_tallies(
        self, content_ids: Sequence[ContentId], voter_id: Optional[UserId]
    ) -> dict[ContentId, VoteTally]:
        """Count votes for a set of items: one grouped count, one voter lookup."""
        ids = list(dict.fromkeys(content_ids))

        # Batch queries to avoid N+1
        counts = await self.vote_repository.count_by_contents(ids)
        user_votes: dict[ContentId, VoteType] = {}
        if voter_id is not None:
            votes = await self.vote_repository.find_by_user_and_contents(voter_id, ids)
            user_votes = {vote.content_id: vote.vote_type for vote in votes}

        return {
            cid: VoteTally(
                content_id=cid,
                thumbs_up=counts.get(cid, {}).get(VoteType.THUMBS_UP, 0),
                thumbs_down=counts.get(cid, {}).get(VoteType.THUMBS_DOWN, 0),
                user_vote=user_votes.get(cid),
            )
            for cid in ids
        }

    async def _build_tally(
        self, content_id: ContentId, viewer_id: Optional[UserId]
    ) -> VoteTally:
        """Count votes for a single item."""
        tallies = await self._count_tallies([content_id], viewer_id)
        return tallies[content_id]
