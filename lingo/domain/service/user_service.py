"""User domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire

from lingo.domain.error import NotFoundError, ValidationError
from lingo.domain.model import User
from lingo.domain.repository import UserRepository
from lingo.domain.value import UserId, UserRole

from .base import Service

DISPLAY_NAME_MIN_LENGTH = 2
DISPLAY_NAME_MAX_LENGTH = 32


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, seed_moderators: list[str]
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            seed_moderators: Emails that start out as moderators
        """
        self.user_repository = user_repository
        self.seed_moderators = {email.strip().lower() for email in seed_moderators}

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_or_create_from_auth(self, user_id: UserId, email: str) -> User:
        """Load the user behind a token, creating the record on first sight.

        New users are LEARNERs unless their email is a seed moderator. The
        insert ignores an existing row, so parallel first requests agree on
        one record.

        Args:
            user_id: Subject from the auth token
            email: Email claim from the auth token

        Returns:
            Existing or newly created user
        """
        with logfire.span("user_service.get_or_create_from_auth", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user:
                return user

            role = (
                UserRole.MODERATOR
                if email.strip().lower() in self.seed_moderators
                else UserRole.LEARNER
            )
            user = await self.user_repository.create_if_absent(
                User(id=user_id, email=email.strip(), role=role)
            )
            logfire.info(
                "User created from auth",
                user_id=str(user_id),
                role=user.role.value,
            )
            return user

    async def update_profile(
        self,
        user_id: UserId,
        display_name: str,
        role_intent: Optional[UserRole] = None,
    ) -> User:
        """Set the display name and, for non-staff users, the chosen role.

        role_intent may only be LEARNER or CONTRIBUTOR. Moderators and
        admins keep their role whatever they pick.

        Args:
            user_id: User to update
            display_name: New display name (2-32 chars after trimming)
            role_intent: Self-selected role; None keeps the current role

        Returns:
            The updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If the display name or role intent is invalid
        """
        name = (display_name or "").strip()
        if not DISPLAY_NAME_MIN_LENGTH <= len(name) <= DISPLAY_NAME_MAX_LENGTH:
            raise ValidationError(
                f"display_name must be {DISPLAY_NAME_MIN_LENGTH} to "
                f"{DISPLAY_NAME_MAX_LENGTH} characters after trimming",
                field="display_name",
            )
        if role_intent not in (None, UserRole.LEARNER, UserRole.CONTRIBUTOR):
            raise ValidationError(
                "role_intent must be LEARNER or CONTRIBUTOR", field="role_intent"
            )

        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            role = user.role
            if role_intent is not None and not user.role.can_moderate:
                role = role_intent

            updated = await self.user_repository.save(
                user.with_profile(name, role, datetime.now(timezone.utc))
            )
            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                role=updated.role.value,
            )
            return updated
