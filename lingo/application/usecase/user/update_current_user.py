"""Update current user (onboarding) use case."""

from uuid import UUID

from pydantic import BaseModel

from lingo.application.usecase.auth import GetCurrentUserResponse
from lingo.domain.service import UserService
from lingo.domain.value import UserId, UserRole


class UpdateCurrentUserRequest(BaseModel):
    """Update current user request."""

    user_id: str  # User ID from authenticated user
    display_name: str
    role_intent: str | None = None  # LEARNER or CONTRIBUTOR


class UpdateCurrentUserResponse(GetCurrentUserResponse):
    """Update current user response: the user after the change."""

    pass


class UpdateCurrentUserUseCase:
    """Use case for finishing onboarding or changing display name and role."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateCurrentUserRequest
    ) -> UpdateCurrentUserResponse:
        """Execute update flow.

        Picking CONTRIBUTOR is how a learner gains the right to submit
        terms. Moderator and admin roles are never granted here.

        Raises:
            ValidationError: If display name or role intent is invalid
            NotFoundError: If the user does not exist
        """
        role_intent = (
            UserRole.parse_intent(request.role_intent)
            if request.role_intent is not None
            else None
        )
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            display_name=request.display_name,
            role_intent=role_intent,
        )
        return UpdateCurrentUserResponse.from_user(user)
