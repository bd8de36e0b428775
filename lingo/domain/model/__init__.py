"""Domain model entities for Lingo."""

from lingo.domain.model.content import Content
from lingo.domain.model.tally import ContentPage, ContentWithVotes, VoteTally
from lingo.domain.model.user import User
from lingo.domain.model.vote import ContentVote

__all__ = [
    "Content",
    "ContentPage",
    "ContentVote",
    "ContentWithVotes",
    "User",
    "VoteTally",
]
