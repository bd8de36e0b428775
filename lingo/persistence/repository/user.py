"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lingo.domain.model import User
from lingo.domain.repository import UserRepository
from lingo.domain.value import UserId
from lingo.persistence.database import storage_errors
from lingo.persistence.mappers import row_to_user, user_to_dict
from lingo.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        async with storage_errors(self.session, "find_user"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create_if_absent(self, user: User) -> User:
        """Insert the user with ON CONFLICT DO NOTHING, then read the row back.

        Two first requests racing on the same ID both end up with the
        row that won the insert.

        Args:
            user: User to create

        Returns:
            The stored user
        """
        stmt = (
            insert(users_table)
            .values(**user_to_dict(user))
            .on_conflict_do_nothing(index_elements=[users_table.c.id])
        )
        async with storage_errors(self.session, "create_user"):
            await self.session.execute(stmt)
            await self.session.flush()

        stored = await self.find_by_id(user.id)
        if stored is None:
            raise RuntimeError(f"User {user.id} missing after insert")
        return stored

    async def save(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user.id)
            .values(**user_to_dict(user))
        )
        async with storage_errors(self.session, "save_user"):
            await self.session.execute(stmt)
            await self.session.flush()
        return user
