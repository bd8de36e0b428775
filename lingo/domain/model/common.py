"""Base model for Lingo domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for domain entities and read models.

    Entities are never mutated in place; state changes return a copy
    (see Content.reviewed).
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow NewType identifiers and value objects
    )
