"""PostgreSQL implementation of Vote repository."""

from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lingo.domain.model import ContentVote
from lingo.domain.repository import VoteRepository
from lingo.domain.value import ContentId, UserId, VoteType
from lingo.persistence.database import storage_errors
from lingo.persistence.mappers import row_to_vote
from lingo.persistence.tables import content_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(
        self,
        content_id: ContentId,
        user_id: UserId,
        vote_type: VoteType,
        voted_at: datetime,
    ) -> None:
        """Insert a vote or switch the existing one's type.

        The (content_id, user_id) key makes concurrent casts by one user
        collapse into a single row. Re-casting the same type leaves the row
        untouched.
        """
        stmt = insert(content_votes_table).values(
            content_id=content_id,
            user_id=user_id,
            vote_type=vote_type.value,
            created_at=voted_at,
            updated_at=voted_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                content_votes_table.c.content_id,
                content_votes_table.c.user_id,
            ],
            set_={
                "vote_type": stmt.excluded.vote_type,
                "updated_at": stmt.excluded.updated_at,
            },
            where=content_votes_table.c.vote_type != stmt.excluded.vote_type,
        )
        async with storage_errors(self.session, "upsert_vote"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def delete_by_content_and_user(
        self, content_id: ContentId, user_id: UserId
    ) -> bool:
        """Delete a user's vote on a content item."""
        stmt = delete(content_votes_table).where(
            and_(
                content_votes_table.c.content_id == content_id,
                content_votes_table.c.user_id == user_id,
            )
        )
        async with storage_errors(self.session, "delete_vote"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_contents(
        self, content_ids: Sequence[ContentId]
    ) -> Dict[ContentId, Dict[VoteType, int]]:
        """Count votes per item and type in a single grouped query."""
        if not content_ids:
            return {}

        stmt = (
            select(
                content_votes_table.c.content_id,
                content_votes_table.c.vote_type,
                func.count().label("votes"),
            )
            .where(content_votes_table.c.content_id.in_(content_ids))
            .group_by(
                content_votes_table.c.content_id, content_votes_table.c.vote_type
            )
        )
        async with storage_errors(self.session, "count_votes"):
            result = await self.session.execute(stmt)
            rows = result.all()

        counts: Dict[ContentId, Dict[VoteType, int]] = defaultdict(dict)
        for row in rows:
            counts[ContentId(row.content_id)][VoteType(row.vote_type)] = row.votes
        return dict(counts)

    async def find_by_user_and_contents(
        self, user_id: UserId, content_ids: Sequence[ContentId]
    ) -> List[ContentVote]:
        """Find a user's votes on multiple items (batch query)."""
        if not content_ids:
            return []

        stmt = select(content_votes_table).where(
            and_(
                content_votes_table.c.user_id == user_id,
                content_votes_table.c.content_id.in_(content_ids),
            )
        )
        async with storage_errors(self.session, "find_user_votes"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_vote(dict(row)) for row in rows]
