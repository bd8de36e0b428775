"""PostgreSQL implementation of Content repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lingo.domain.model import Content
from lingo.domain.repository import ContentRepository
from lingo.domain.value import ContentId, ContentStatus, ReviewDecision
from lingo.persistence.database import storage_errors
from lingo.persistence.mappers import row_to_content
from lingo.persistence.tables import contents_table


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the query matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        term: str,
        definition: str,
        example: Optional[str],
        submitted_by: str,
        created_at: datetime,
    ) -> Content:
        """Insert a PENDING item; the database assigns the ID."""
        stmt = (
            insert(contents_table)
            .values(
                term=term,
                definition=definition,
                example=example,
                status=ContentStatus.PENDING.value,
                submitted_by=submitted_by,
                created_at=created_at,
                updated_at=created_at,
            )
            .returning(*contents_table.c)
        )
        async with storage_errors(self.session, "create_content"):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
        return row_to_content(dict(row))

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find content by ID."""
        stmt = select(contents_table).where(contents_table.c.id == content_id)
        async with storage_errors(self.session, "find_content"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_content(dict(row)) if row else None

    async def find_by_status(self, status: ContentStatus) -> List[Content]:
        """Find all content with a status.

        The pending queue is ordered oldest first; other statuses by ID.
        """
        stmt = select(contents_table).where(contents_table.c.status == status.value)
        if status is ContentStatus.PENDING:
            stmt = stmt.order_by(
                contents_table.c.created_at.asc(), contents_table.c.id.asc()
            )
        else:
            stmt = stmt.order_by(contents_table.c.id.asc())

        async with storage_errors(self.session, "find_content_by_status"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_content(dict(row)) for row in rows]

    async def find_pending_page(self, limit: int, offset: int) -> List[Content]:
        """Find one slice of the pending queue, oldest first."""
        stmt = (
            select(contents_table)
            .where(contents_table.c.status == ContentStatus.PENDING.value)
            .order_by(contents_table.c.created_at.asc(), contents_table.c.id.asc())
            .limit(limit)
            .offset(offset)
        )
        async with storage_errors(self.session, "find_pending_page"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_content(dict(row)) for row in rows]

    async def count_by_status(self, status: ContentStatus) -> int:
        """Count content with a status."""
        stmt = (
            select(func.count())
            .select_from(contents_table)
            .where(contents_table.c.status == status.value)
        )
        async with storage_errors(self.session, "count_content_by_status"):
            result = await self.session.execute(stmt)
            count = result.scalar()
        return count or 0

    async def find_approved_by_term(self, term: str) -> List[Content]:
        """Find approved content whose trimmed term equals term, ignoring case."""
        stmt = (
            select(contents_table)
            .where(
                contents_table.c.status == ContentStatus.APPROVED.value,
                func.lower(func.trim(contents_table.c.term)) == term.strip().lower(),
            )
            .order_by(contents_table.c.id.asc())
        )
        async with storage_errors(self.session, "find_approved_by_term"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_content(dict(row)) for row in rows]

    async def search_approved(self, query: str) -> List[Content]:
        """Find approved content containing query in term, definition or example."""
        pattern = f"%{_escape_like(query.strip())}%"
        stmt = (
            select(contents_table)
            .where(
                contents_table.c.status == ContentStatus.APPROVED.value,
                or_(
                    contents_table.c.term.ilike(pattern, escape="\\"),
                    contents_table.c.definition.ilike(pattern, escape="\\"),
                    contents_table.c.example.ilike(pattern, escape="\\"),
                ),
            )
            .order_by(contents_table.c.id.asc())
        )
        async with storage_errors(self.session, "search_approved"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_content(dict(row)) for row in rows]

    async def review_if_pending(
        self,
        content_id: ContentId,
        decision: ReviewDecision,
        reviewer: str,
        comment: Optional[str],
        reviewed_at: datetime,
    ) -> Optional[Content]:
        """Apply a decision only while the row is still PENDING.

        The status check is part of the UPDATE, so two concurrent reviews
        cannot both succeed.
        """
        with logfire.span(
            "content_repository.review_if_pending", content_id=content_id
        ):
            stmt = (
                update(contents_table)
                .where(
                    contents_table.c.id == content_id,
                    contents_table.c.status == ContentStatus.PENDING.value,
                )
                .values(
                    status=decision.resulting_status.value,
                    reviewed_by=reviewer,
                    review_comment=comment,
                    updated_at=reviewed_at,
                )
                .returning(*contents_table.c)
            )
            async with storage_errors(self.session, "review_content"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                await self.session.flush()

            if not row:
                logfire.debug("No pending row matched", content_id=content_id)
                return None
            return row_to_content(dict(row))
