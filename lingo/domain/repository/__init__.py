"""Repository interfaces for Lingo domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lingo.domain.repository.content import ContentRepository
from lingo.domain.repository.user import UserRepository
from lingo.domain.repository.vote import VoteRepository

__all__ = [
    "ContentRepository",
    "UserRepository",
    "VoteRepository",
]
