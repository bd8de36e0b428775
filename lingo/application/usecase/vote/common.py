"""Response models shared by vote use cases."""

from pydantic import BaseModel

from lingo.domain.model import VoteTally
from lingo.domain.value import VoteType


class VoteSummary(BaseModel):
    """Vote counts for one item plus the caller's own vote."""

    content_id: int
    thumbs_up: int
    thumbs_down: int
    user_vote: VoteType | None

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VoteSummary":
        """Build a summary from a domain tally."""
        return cls(
            content_id=tally.content_id,
            thumbs_up=tally.thumbs_up,
            thumbs_down=tally.thumbs_down,
            user_vote=tally.user_vote,
        )
