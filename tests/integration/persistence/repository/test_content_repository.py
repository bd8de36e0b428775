"""Integration tests for ContentRepository.

Run against in-memory persistence. The PostgreSQL repositories are
covered by test_postgres_repositories.py when DATABASE__URL is set.
"""

import pytest

from lingo.domain.repository import ContentRepository
from lingo.domain.value import ContentId, ContentStatus, ReviewDecision
from tests.harness import at, create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


async def _create(repo: ContentRepository, term: str, minutes: int = 0):
    return await repo.create(
        term=term,
        definition=f"Meaning of {term}",
        example=None,
        submitted_by="kai@example.com",
        created_at=at(minutes),
    )


class TestContentRepositoryIntegration:
    """Repository contract tests."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_pending_status(self, integration_env):
        # Arrange
        repo = await integration_env.get(ContentRepository)

        # Act
        content = await _create(repo, "Rizz")

        # Assert
        assert content.id is not None
        assert content.status == ContentStatus.PENDING
        assert await repo.find_by_id(content.id) == content

    @pytest.mark.asyncio
    async def test_pending_page_orders_by_created_at(self, integration_env):
        """Older items come first regardless of insertion order."""
        repo = await integration_env.get(ContentRepository)
        newer = await _create(repo, "Newer", minutes=10)
        older = await _create(repo, "Older", minutes=1)

        page = await repo.find_pending_page(limit=1, offset=0)
        rest = await repo.find_pending_page(limit=1, offset=1)

        assert [c.id for c in page] == [older.id]
        assert [c.id for c in rest] == [newer.id]
        assert await repo.count_by_status(ContentStatus.PENDING) == 2

    @pytest.mark.asyncio
    async def test_review_if_pending_applies_once(self, integration_env):
        """The conditional update matches only while the item is PENDING."""
        repo = await integration_env.get(ContentRepository)
        content = await _create(repo, "Mid")

        first = await repo.review_if_pending(
            content.id, ReviewDecision.APPROVE, "mod", None, at(5)
        )
        second = await repo.review_if_pending(
            content.id, ReviewDecision.REJECT, "mod", "late", at(6)
        )

        assert first is not None
        assert first.status == ContentStatus.APPROVED
        assert first.reviewed_by == "mod"
        assert second is None
        stored = await repo.find_by_id(content.id)
        assert stored.status == ContentStatus.APPROVED

    @pytest.mark.asyncio
    async def test_review_if_pending_missing_item(self, integration_env):
        repo = await integration_env.get(ContentRepository)

        result = await repo.review_if_pending(
            ContentId(404), ReviewDecision.APPROVE, "mod", None, at(0)
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_find_approved_by_term_ignores_case(self, integration_env):
        repo = await integration_env.get(ContentRepository)
        approved = await _create(repo, "Sus")
        await _create(repo, "sus")  # still pending
        await repo.review_if_pending(
            approved.id, ReviewDecision.APPROVE, "mod", None, at(1)
        )

        matches = await repo.find_approved_by_term("SUS")

        assert [c.id for c in matches] == [approved.id]

    @pytest.mark.asyncio
    async def test_search_approved_treats_wildcards_literally(self, integration_env):
        repo = await integration_env.get(ContentRepository)
        content = await _create(repo, "100%")
        await repo.review_if_pending(
            content.id, ReviewDecision.APPROVE, "mod", None, at(1)
        )

        assert [c.id for c in await repo.search_approved("0%")] == [content.id]
        assert await repo.search_approved("_x") == []
