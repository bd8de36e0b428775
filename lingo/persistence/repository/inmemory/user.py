"""In-memory user repository for testing."""

from typing import Optional

from lingo.domain.model.user import User
from lingo.domain.repository.user import UserRepository
from lingo.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def create_if_absent(self, user: User) -> User:
        """Store the user unless the ID is taken; return the stored user."""
        return self._users.setdefault(user.id, user)

    async def save(self, user: User) -> User:
        """Update a user."""
        self._users[user.id] = user
        return user
