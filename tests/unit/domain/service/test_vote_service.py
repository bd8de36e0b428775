"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from lingo.domain.error import InvalidStateError, NotFoundError
from lingo.domain.service import ContentService, VoteService
from lingo.domain.value import ContentId, ReviewDecision, UserId, VoteType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _approved_id(service: ContentService, term: str = "Rizz") -> ContentId:
    content = await service.submit(term, "Charm", None, "kai@example.com")
    await service.review(content.id, ReviewDecision.APPROVE, "mod1")
    return content.id


class TestCast:
    """Tests for cast method."""

    @pytest.mark.asyncio
    async def test_up_then_down_replaces_vote(self, unit_env):
        """Switching from up to down counts the voter once."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        content_id = await _approved_id(content_service)
        voter = UserId(uuid4())

        await vote_service.cast(content_id, voter, VoteType.THUMBS_UP)
        tally = await vote_service.cast(content_id, voter, VoteType.THUMBS_DOWN)

        assert tally.thumbs_up == 0
        assert tally.thumbs_down == 1
        assert tally.user_vote == VoteType.THUMBS_DOWN

    @pytest.mark.asyncio
    async def test_same_vote_twice_is_counted_once(self, unit_env):
        """Re-casting the same type changes nothing."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        content_id = await _approved_id(content_service)
        voter = UserId(uuid4())

        await vote_service.cast(content_id, voter, VoteType.THUMBS_UP)
        tally = await vote_service.cast(content_id, voter, VoteType.THUMBS_UP)

        assert tally.thumbs_up == 1
        assert tally.thumbs_down == 0

    @pytest.mark.asyncio
    async def test_tally_counts_distinct_voters(self, unit_env):
        """thumbs_up + thumbs_down equals the number of active voters."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        content_id = await _approved_id(content_service)
        voters = [UserId(uuid4()) for _ in range(5)]

        for voter in voters[:3]:
            await vote_service.cast(content_id, voter, VoteType.THUMBS_UP)
        for voter in voters[3:]:
            await vote_service.cast(content_id, voter, VoteType.THUMBS_DOWN)
        # One voter changes their mind, one withdraws
        await vote_service.cast(content_id, voters[0], VoteType.THUMBS_DOWN)
        await vote_service.clear(content_id, voters[1])

        tally = await vote_service.tally(content_id)

        assert tally.thumbs_up == 1
        assert tally.thumbs_down == 3
        assert tally.thumbs_up + tally.thumbs_down == 4
        assert tally.user_vote is None

    @pytest.mark.asyncio
    async def test_vote_on_pending_content_is_refused(self, unit_env):
        """Only approved content can be voted on."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        content = await content_service.submit("Mid", "Average", None, "k@e.com")

        with pytest.raises(InvalidStateError, match="not approved"):
            await vote_service.cast(content.id, UserId(uuid4()), VoteType.THUMBS_UP)

    @pytest.mark.asyncio
    async def test_vote_on_missing_content_raises_not_found(self, unit_env):
        """Voting on an unknown ID is NotFound."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast(ContentId(77), UserId(uuid4()), VoteType.THUMBS_UP)


class TestClear:
    """Tests for clear method."""

    @pytest.mark.asyncio
    async def test_clear_without_vote_is_noop(self, unit_env):
        """Clearing a vote that does not exist leaves counts unchanged."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        content_id = await _approved_id(content_service)
        await vote_service.cast(content_id, UserId(uuid4()), VoteType.THUMBS_UP)
        before = await vote_service.tally(content_id)

        after = await vote_service.clear(content_id, UserId(uuid4()))

        assert (after.thumbs_up, after.thumbs_down) == (
            before.thumbs_up,
            before.thumbs_down,
        )
        assert after.user_vote is None

    @pytest.mark.asyncio
    async def test_clear_removes_vote(self, unit_env):
        """Clearing an existing vote removes it from the tally."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        content_id = await _approved_id(content_service)
        voter = UserId(uuid4())
        await vote_service.cast(content_id, voter, VoteType.THUMBS_DOWN)

        tally = await vote_service.clear(content_id, voter)

        assert tally.thumbs_down == 0
        assert tally.user_vote is None

    @pytest.mark.asyncio
    async def test_clear_on_missing_content_raises_not_found(self, unit_env):
        """Clearing on an unknown ID is NotFound."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.clear(ContentId(5), UserId(uuid4()))


class TestBatchTallies:
    """Tests for tally_for_set and list_approved_with_votes."""

    @pytest.mark.asyncio
    async def test_tally_for_set_reports_every_id(self, unit_env):
        """Items without votes get zero counts."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        voted = await _approved_id(content_service, "Drip")
        quiet = await _approved_id(content_service, "Sus")
        voter = UserId(uuid4())
        await vote_service.cast(voted, voter, VoteType.THUMBS_UP)

        tallies = await vote_service.tally_for_set([voted, quiet], voter)

        assert tallies[voted].thumbs_up == 1
        assert tallies[voted].user_vote == VoteType.THUMBS_UP
        assert tallies[quiet].thumbs_up == 0
        assert tallies[quiet].user_vote is None

    @pytest.mark.asyncio
    async def test_tally_for_empty_set(self, unit_env):
        """No IDs means no tallies."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.tally_for_set([]) == {}

    @pytest.mark.asyncio
    async def test_list_approved_with_votes(self, unit_env):
        """Every approved item is listed with the viewer's vote."""
        content_service = await unit_env.get(ContentService)
        vote_service = await unit_env.get(VoteService)
        first = await _approved_id(content_service, "Drip")
        second = await _approved_id(content_service, "Sus")
        await content_service.submit("Pending", "p", None, "k@example.com")
        viewer = UserId(uuid4())
        await vote_service.cast(second, viewer, VoteType.THUMBS_DOWN)
        await vote_service.cast(second, UserId(uuid4()), VoteType.THUMBS_DOWN)

        items = await vote_service.list_approved_with_votes(viewer)

        assert [item.content.id for item in items] == [first, second]
        assert items[0].thumbs_down == 0
        assert items[0].user_vote is None
        assert items[1].thumbs_down == 2
        assert items[1].user_vote == VoteType.THUMBS_DOWN
