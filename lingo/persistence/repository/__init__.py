"""PostgreSQL repository implementations."""

from lingo.persistence.repository.content import PostgresContentRepository
from lingo.persistence.repository.user import PostgresUserRepository
from lingo.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresContentRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
