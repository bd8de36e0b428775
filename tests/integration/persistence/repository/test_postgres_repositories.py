"""Integration tests for the PostgreSQL repositories.

These run only when DATABASE__URL points at a migrated database
(``python scripts/run_migrations.py``). Rows are committed when each
test's request scope closes, so every test uses fresh terms and IDs.
"""

import os
from uuid import uuid4

import pytest

from lingo.domain.model import User
from lingo.domain.repository import ContentRepository, UserRepository, VoteRepository
from lingo.domain.value import ContentStatus, ReviewDecision, UserId, UserRole, VoteType
from tests.harness import at, create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL not set; PostgreSQL integration tests skipped",
)

# Integration test fixture - real persistence
postgres_env = create_env_fixture(unmock={"persistence"})


async def _create(postgres_env, term: str | None = None):
    repo = await postgres_env.get(ContentRepository)
    return await repo.create(
        term=term or f"term-{uuid4().hex[:12]}",
        definition="Meaning",
        example=None,
        submitted_by="kai@example.com",
        created_at=at(0),
    )


class TestPostgresContentRepository:
    """Conditional review and search against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_second_review_matches_no_row(self, postgres_env):
        # Arrange
        repo = await postgres_env.get(ContentRepository)
        content = await _create(postgres_env)

        # Act
        first = await repo.review_if_pending(
            content.id, ReviewDecision.APPROVE, "mod1", None, at(1)
        )
        second = await repo.review_if_pending(
            content.id, ReviewDecision.REJECT, "mod2", "Late", at(2)
        )

        # Assert
        assert first.status == ContentStatus.APPROVED
        assert second is None
        stored = await repo.find_by_id(content.id)
        assert stored.reviewed_by == "mod1"
        assert stored.updated_at == at(1)

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, postgres_env):
        repo = await postgres_env.get(ContentRepository)
        marker = uuid4().hex[:12]
        content = await _create(postgres_env, term=f"100%_{marker}")
        await repo.review_if_pending(
            content.id, ReviewDecision.APPROVE, "mod1", None, at(1)
        )

        hits = await repo.search_approved(f"100%_{marker}")
        misses = await repo.search_approved(f"100xx{marker}")

        assert [c.id for c in hits] == [content.id]
        assert misses == []


class TestPostgresVoteRepository:
    """Vote upsert against the unique (content_id, user_id) constraint."""

    @pytest.mark.asyncio
    async def test_upsert_switches_type_in_place(self, postgres_env):
        repo = await postgres_env.get(VoteRepository)
        content = await _create(postgres_env)
        user_id = UserId(uuid4())

        await repo.upsert(content.id, user_id, VoteType.THUMBS_UP, at(2))
        await repo.upsert(content.id, user_id, VoteType.THUMBS_DOWN, at(3))

        [vote] = await repo.find_by_user_and_contents(user_id, [content.id])
        assert vote.vote_type == VoteType.THUMBS_DOWN
        assert vote.created_at == at(2)
        assert await repo.count_by_contents([content.id]) == {
            content.id: {VoteType.THUMBS_DOWN: 1}
        }


class TestPostgresUserRepository:
    """Get-or-create insert against the users primary key."""

    @pytest.mark.asyncio
    async def test_create_if_absent_keeps_first_row(self, postgres_env):
        repo = await postgres_env.get(UserRepository)
        user_id = UserId(uuid4())

        first = await repo.create_if_absent(
            User(id=user_id, email="first@example.com", role=UserRole.LEARNER)
        )
        second = await repo.create_if_absent(
            User(id=user_id, email="second@example.com", role=UserRole.MODERATOR)
        )

        assert second.email == "first@example.com"
        assert second.role == UserRole.LEARNER
        assert second.id == first.id

    @pytest.mark.asyncio
    async def test_save_updates_profile(self, postgres_env):
        repo = await postgres_env.get(UserRepository)
        user = await repo.create_if_absent(
            User(id=UserId(uuid4()), email="kai@example.com")
        )

        await repo.save(user.with_profile("Kai", UserRole.CONTRIBUTOR, at(5)))

        stored = await repo.find_by_id(user.id)
        assert stored.display_name == "Kai"
        assert stored.role == UserRole.CONTRIBUTOR
        assert stored.onboarding_completed
