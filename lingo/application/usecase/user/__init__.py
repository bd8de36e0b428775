"""User profile use cases."""

from .update_current_user import (
    UpdateCurrentUserRequest,
    UpdateCurrentUserResponse,
    UpdateCurrentUserUseCase,
)

__all__ = [
    "UpdateCurrentUserRequest",
    "UpdateCurrentUserResponse",
    "UpdateCurrentUserUseCase",
]
