"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Sequence

from lingo.domain.model.vote import ContentVote
from lingo.domain.value import ContentId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for ContentVote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def upsert(
        self,
        content_id: ContentId,
        user_id: UserId,
        vote_type: VoteType,
        voted_at: datetime,
    ) -> None:
        """Create the user's vote or change its type, atomically.

        Casting the same type again leaves the row untouched.

        Args:
            content_id: ID of the content item
            user_id: The voter's ID
            vote_type: Thumbs up or down
            voted_at: Timestamp for created_at/updated_at
        """
        pass

    @abstractmethod
    async def delete_by_content_and_user(
        self, content_id: ContentId, user_id: UserId
    ) -> bool:
        """Delete a user's vote on a content item.

        Args:
            content_id: ID of the content item
            user_id: The voter's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def count_by_contents(
        self, content_ids: Sequence[ContentId]
    ) -> Dict[ContentId, Dict[VoteType, int]]:
        """Count votes per type for several content items (single query).

        Args:
            content_ids: IDs of the content items

        Returns:
            Mapping of content ID to counts per vote type; items without
            votes may be absent
        """
        pass

    @abstractmethod
    async def find_by_user_and_contents(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> List[ContentVote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The voter's ID
            content_ids: IDs of the content items to check

        Returns:
            The user's votes on the specified items
        """
        pass
