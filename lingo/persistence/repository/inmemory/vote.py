"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Dict, List, Sequence

from lingo.domain.model.vote import ContentVote
from lingo.domain.repository.vote import VoteRepository
from lingo.domain.value import ContentId, UserId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Keyed by (content_id, user_id), so a user holds at most one vote per item.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[ContentId, UserId], ContentVote] = {}

    async def upsert(
        self,
        content_id: ContentId,
        user_id: UserId,
        vote_type: VoteType,
        voted_at: datetime,
    ) -> None:
        """Insert a vote or switch the existing one's type."""
        key = (content_id, user_id)
        existing = self._votes.get(key)
        if existing is None:
            self._votes[key] = ContentVote(
                content_id=content_id,
                user_id=user_id,
                vote_type=vote_type,
                created_at=voted_at,
                updated_at=voted_at,
            )
        elif existing.vote_type != vote_type:
            self._votes[key] = existing.model_copy(
                update={"vote_type": vote_type, "updated_at": voted_at}
            )

    async def delete_by_content_and_user(
        self, content_id: ContentId, user_id: UserId
    ) -> bool:
        """Delete a user's vote on a content item."""
        return self._votes.pop((content_id, user_id), None) is not None

    async def count_by_contents(
        self, content_ids: Sequence[ContentId]
    ) -> Dict[ContentId, Dict[VoteType, int]]:
        """Count votes per item and type."""
        wanted = set(content_ids)
        counts: Dict[ContentId, Dict[VoteType, int]] = {}
        for vote in self._votes.values():
            if vote.content_id in wanted:
                by_type = counts.setdefault(vote.content_id, {})
                by_type[vote.vote_type] = by_type.get(vote.vote_type, 0) + 1
        return counts

    async def find_by_user_and_contents(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> List[ContentVote]:
        """Find a user's votes on multiple items."""
        return [
            vote
            for (content_id, voter_id), vote in self._votes.items()
            if voter_id == user_id and content_id in content_ids
        ]
