"""Unit tests for route authentication helpers."""

from datetime import datetime, timezone

import pytest

from lingo.application.usecase.auth import GetCurrentUserResponse
from lingo.domain.error import NotAuthorizedError
from lingo.domain.value import UserRole
from lingo.interface.api.auth import (
    extract_token,
    require_contributor,
    require_moderator,
)


def _user(role: UserRole) -> GetCurrentUserResponse:
    return GetCurrentUserResponse(
        user_id="5f0c6a8e-1111-4b7a-9d55-000000000001",
        email="luna@example.com",
        display_name=None,
        role=role,
        can_contribute=role.can_contribute,
        can_moderate=role.can_moderate,
        onboarding_completed=False,
        created_at=datetime.now(timezone.utc),
    )


class TestExtractToken:
    """Tests for extract_token."""

    def test_cookie_wins_over_header(self):
        assert extract_token("cookie-token", "Bearer header-token") == "cookie-token"

    def test_bearer_header(self):
        assert extract_token(None, "bearer  abc.def ") == "abc.def"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer   "])
    def test_missing_or_unsupported(self, header):
        assert extract_token(None, header) is None


class TestRoleChecks:
    """Tests for require_contributor and require_moderator."""

    def test_learner_cannot_contribute(self):
        with pytest.raises(NotAuthorizedError) as exc_info:
            require_contributor(_user(UserRole.LEARNER))
        assert exc_info.value.role == "LEARNER"

    def test_contributor_cannot_moderate(self):
        user = _user(UserRole.CONTRIBUTOR)

        require_contributor(user)
        with pytest.raises(NotAuthorizedError):
            require_moderator(user)

    def test_moderator_can_do_both(self):
        user = _user(UserRole.MODERATOR)

        require_contributor(user)
        require_moderator(user)
