"""Vote entity.

Votes record a reader's thumbs-up or thumbs-down on an approved term.
Each user holds at most one vote per content item.
"""

from datetime import datetime

from pydantic import Field

from lingo.domain.model.common import DomainModel, utc_now
from lingo.domain.value import ContentId, UserId, VoteType


class ContentVote(DomainModel):
    """Vote entity.

    Identified by (content_id, user_id); enforced by a unique constraint.
    Casting a different type replaces the vote in place.
    """

    content_id: ContentId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
