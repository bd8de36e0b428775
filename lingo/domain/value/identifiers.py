"""Strongly typed identifiers for Lingo domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Users come from the identity provider, content ids are store-assigned integers
UserId = NewType("UserId", UUID)
ContentId = NewType("ContentId", int)
