"""Content aggregate root.

A content item is a submitted slang term. It is created PENDING and is
changed exactly once, by a moderator's review decision.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from lingo.domain.model.common import DomainModel, utc_now
from lingo.domain.value import ContentId, ContentStatus, ReviewDecision

TERM_MAX_LENGTH = 100
DEFINITION_MAX_LENGTH = 500
EXAMPLE_MAX_LENGTH = 500
SUBMITTER_MAX_LENGTH = 100
REVIEW_COMMENT_MAX_LENGTH = 500


class Content(DomainModel):
    """Content aggregate root.

    Business rules:
    - Status starts at PENDING
    - APPROVED and REJECTED are terminal and always carry a reviewer
    - Term, definition and example are never edited after submission
    """

    id: ContentId
    term: str = Field(min_length=1, max_length=TERM_MAX_LENGTH)
    definition: str = Field(min_length=1, max_length=DEFINITION_MAX_LENGTH)
    example: Optional[str] = Field(default=None, max_length=EXAMPLE_MAX_LENGTH)
    status: ContentStatus = ContentStatus.PENDING
    submitted_by: str = Field(min_length=1, max_length=SUBMITTER_MAX_LENGTH)
    reviewed_by: Optional[str] = None
    review_comment: Optional[str] = Field(
        default=None, max_length=REVIEW_COMMENT_MAX_LENGTH
    )
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_review_metadata(self) -> "Content":
        """Reviewed content must record who reviewed it."""
        if self.status.is_terminal and not self.reviewed_by:
            raise ValueError(f"{self.status.value} content must have a reviewer")
        return self

    def reviewed(
        self,
        decision: ReviewDecision,
        reviewer: str,
        comment: Optional[str],
        reviewed_at: datetime,
    ) -> "Content":
        """Return a copy with the review decision applied.

        Callers are responsible for checking the item is still PENDING
        atomically with persisting the result.
        """
        return self.model_copy(
            update={
                "status": decision.resulting_status,
                "reviewed_by": reviewer,
                "review_comment": comment,
                "updated_at": reviewed_at,
            }
        )
