"""User aggregate root.

Users are authenticated by an external identity provider. The first
authenticated request creates the local record that carries the role.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lingo.domain.model.common import DomainModel, utc_now
from lingo.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str = Field(min_length=1, max_length=255)
    display_name: Optional[str] = Field(default=None, max_length=100)
    role: UserRole = UserRole.LEARNER
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def onboarding_completed(self) -> bool:
        """A user has onboarded once they have chosen a display name."""
        return bool(self.display_name and self.display_name.strip())

    def with_profile(
        self, display_name: str, role: UserRole, updated_at: datetime
    ) -> "User":
        """Return a copy with a new display name and role."""
        return self.model_copy(
            update={
                "display_name": display_name,
                "role": role,
                "updated_at": updated_at,
            }
        )
