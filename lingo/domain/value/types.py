"""Domain value objects for Lingo.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from lingo.domain.error import ValidationError


class ContentStatus(str, Enum):
    """Moderation status of a submitted term.

    PENDING is the initial state; APPROVED and REJECTED are terminal.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @property
    def is_terminal(self) -> bool:
        """Whether a review decision has already been applied."""
        return self is not ContentStatus.PENDING


class ReviewDecision(str, Enum):
    """A moderator's decision on a pending term."""

    APPROVE = "APPROVE"
    REJECT = "REJECT"

    @property
    def resulting_status(self) -> ContentStatus:
        """Status the content moves to when this decision is applied."""
        if self is ReviewDecision.APPROVE:
            return ContentStatus.APPROVED
        return ContentStatus.REJECTED

    @classmethod
    def parse(cls, raw: str | None) -> "ReviewDecision":
        """Parse a decision, accepting APPROVE/APPROVED and REJECT/REJECTED.

        Raises:
            ValidationError: If the value is blank or unrecognised
        """
        if raw is None or not raw.strip():
            raise ValidationError("decision is required", field="decision")

        normalized = raw.strip().upper()
        if normalized in ("APPROVE", "APPROVED"):
            return cls.APPROVE
        if normalized in ("REJECT", "REJECTED"):
            return cls.REJECT

        raise ValidationError(
            "decision must be APPROVE/APPROVED or REJECT/REJECTED", field="decision"
        )


class VoteType(str, Enum):
    """Type of vote on an approved term."""

    THUMBS_UP = "THUMBS_UP"
    THUMBS_DOWN = "THUMBS_DOWN"

    @classmethod
    def parse(cls, raw: str | None) -> "VoteType":
        """Parse a vote type, ignoring case and surrounding whitespace.

        Raises:
            ValidationError: If the value is not THUMBS_UP or THUMBS_DOWN
        """
        normalized = (raw or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise ValidationError(
                "vote_type must be THUMBS_UP or THUMBS_DOWN", field="vote_type"
            ) from None


class UserRole(str, Enum):
    """Role supplied by the identity collaborator.

    All role checks go through can_contribute / can_moderate so the
    submission and review entry points agree on who may do what.
    """

    LEARNER = "LEARNER"
    CONTRIBUTOR = "CONTRIBUTOR"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"

    @property
    def can_contribute(self) -> bool:
        """Whether this role may submit new terms."""
        return self in (UserRole.CONTRIBUTOR, UserRole.MODERATOR, UserRole.ADMIN)

    @property
    def can_moderate(self) -> bool:
        """Whether this role may review pending terms."""
        return self in (UserRole.MODERATOR, UserRole.ADMIN)

    @classmethod
    def parse_intent(cls, raw: str) -> "UserRole":
        """Parse the role a user picks for themselves during onboarding.

        Only LEARNER and CONTRIBUTOR can be self-selected.

        Raises:
            ValidationError: For any other value
        """
        normalized = (raw or "").strip().upper()
        if normalized in (cls.LEARNER.value, cls.CONTRIBUTOR.value):
            return cls(normalized)
        raise ValidationError(
            "role_intent must be LEARNER or CONTRIBUTOR", field="role_intent"
        )
