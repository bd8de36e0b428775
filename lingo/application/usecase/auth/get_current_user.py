"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from lingo.domain.model import User
from lingo.domain.service import JWTService, UserService
from lingo.domain.value import UserId, UserRole
from lingo.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    display_name: str | None
    role: UserRole
    can_contribute: bool
    can_moderate: bool
    onboarding_completed: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "GetCurrentUserResponse":
        """Build the response from a domain user."""
        return cls(
            user_id=str(user.id),
            email=user.email,
            display_name=user.display_name,
            role=user.role,
            can_contribute=user.role.can_contribute,
            can_moderate=user.role.can_moderate,
            onboarding_completed=user.onboarding_completed,
            created_at=user.created_at,
        )


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Extract subject and email from token
        3. Load the user, creating it on first sight
        4. Return user info with role capabilities

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid

        Raises:
            JWTError: If token is invalid, expired or its subject is not a UUID
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        try:
            user_id = UserId(UUID(payload.sub))
        except ValueError as e:
            raise JWTError("Token subject is not a valid user ID") from e

        user = await self.user_service.get_or_create_from_auth(user_id, payload.email)

        return GetCurrentUserResponse.from_user(user)
