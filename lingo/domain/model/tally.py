"""Derived read models: vote tallies and pages.

Nothing here is persisted; these are recomputed from the store on read.
"""

from math import ceil
from typing import Optional

from pydantic import Field

from lingo.domain.model.common import DomainModel
from lingo.domain.model.content import Content
from lingo.domain.value import ContentId, VoteType
from lingo.domain.value.common import ValueObject


class VoteTally(ValueObject):
    """Aggregate thumbs-up/down counts for one content item."""

    content_id: ContentId
    thumbs_up: int = Field(default=0, ge=0)
    thumbs_down: int = Field(default=0, ge=0)
    user_vote: Optional[VoteType] = None


class ContentWithVotes(DomainModel):
    """An approved content item with its tally for a given viewer."""

    content: Content
    thumbs_up: int = Field(ge=0)
    thumbs_down: int = Field(ge=0)
    user_vote: Optional[VoteType] = None


class ContentPage(DomainModel):
    """One page of content items plus paging metadata."""

    content: list[Content]
    total_elements: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=0)
    page_size: int = Field(ge=1)

    @classmethod
    def build(
        cls, items: list[Content], total: int, page: int, size: int
    ) -> "ContentPage":
        """Build a page, deriving the page count from the total."""
        return cls(
            content=items,
            total_elements=total,
            total_pages=ceil(total / size) if total else 0,
            current_page=page,
            page_size=size,
        )
