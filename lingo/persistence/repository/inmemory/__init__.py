"""In-memory repository implementations for testing."""

from .content import InMemoryContentRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryContentRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
