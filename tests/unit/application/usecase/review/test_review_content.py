"""Unit tests for ReviewContentUseCase."""

import pytest

from lingo.application.usecase.review import (
    ReviewContentRequest,
    ReviewContentUseCase,
)
from lingo.domain.error import InvalidStateError, ValidationError
from lingo.domain.service import ContentService
from lingo.domain.value import ContentStatus
from tests.harness import MODERATOR_EMAIL, create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReviewContentUseCase:
    """Tests for ReviewContentUseCase."""

    @pytest.mark.asyncio
    async def test_approved_alias_is_accepted(self, unit_env):
        """'approved' is treated the same as APPROVE."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        use_case = await unit_env.get(ReviewContentUseCase)
        content = await content_service.submit("Mid", "Average", None, "k@e.com")

        # Act
        response = await use_case.execute(
            ReviewContentRequest(
                content_id=content.id, decision="approved", reviewer=MODERATOR_EMAIL
            )
        )

        # Assert
        assert response.status == ContentStatus.APPROVED
        assert response.reviewed_by == MODERATOR_EMAIL
        assert response.review_comment is None

    @pytest.mark.asyncio
    async def test_reject_requires_comment(self, unit_env):
        """Rejecting without a comment fails and leaves the item pending."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        use_case = await unit_env.get(ReviewContentUseCase)
        content = await content_service.submit("Mid", "Average", None, "k@e.com")

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                ReviewContentRequest(
                    content_id=content.id,
                    decision="REJECT",
                    comment="   ",
                    reviewer=MODERATOR_EMAIL,
                )
            )

        # Assert
        assert exc_info.value.field == "comment"
        stored = await content_service.get_by_id(content.id)
        assert stored.status == ContentStatus.PENDING

    @pytest.mark.asyncio
    async def test_reject_with_comment(self, unit_env):
        """A rejection records the trimmed comment."""
        content_service = await unit_env.get(ContentService)
        use_case = await unit_env.get(ReviewContentUseCase)
        content = await content_service.submit("Mid", "Average", None, "k@e.com")

        response = await use_case.execute(
            ReviewContentRequest(
                content_id=content.id,
                decision="rejected",
                comment="  Too vague  ",
                reviewer=MODERATOR_EMAIL,
            )
        )

        assert response.status == ContentStatus.REJECTED
        assert response.review_comment == "Too vague"

    @pytest.mark.asyncio
    async def test_unknown_decision_is_rejected(self, unit_env):
        content_service = await unit_env.get(ContentService)
        use_case = await unit_env.get(ReviewContentUseCase)
        content = await content_service.submit("Mid", "Average", None, "k@e.com")

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                ReviewContentRequest(
                    content_id=content.id, decision="MAYBE", reviewer=MODERATOR_EMAIL
                )
            )

        assert exc_info.value.field == "decision"

    @pytest.mark.asyncio
    async def test_second_review_conflicts(self, unit_env):
        """A reviewed item cannot be reviewed again."""
        content_service = await unit_env.get(ContentService)
        use_case = await unit_env.get(ReviewContentUseCase)
        content = await content_service.submit("Mid", "Average", None, "k@e.com")
        await use_case.execute(
            ReviewContentRequest(
                content_id=content.id, decision="APPROVE", reviewer=MODERATOR_EMAIL
            )
        )

        with pytest.raises(InvalidStateError):
            await use_case.execute(
                ReviewContentRequest(
                    content_id=content.id,
                    decision="REJECT",
                    comment="Changed my mind",
                    reviewer=MODERATOR_EMAIL,
                )
            )
