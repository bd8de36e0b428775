"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lingo.domain.model.user import User
from lingo.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_if_absent(self, user: User) -> User:
        """Insert a user unless one with the same ID already exists.

        Concurrent first requests of one user must all succeed and see the
        same row, so an existing row wins and is returned unchanged.

        Args:
            user: The user to create

        Returns:
            The stored user (the new one, or the one that was already there)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
