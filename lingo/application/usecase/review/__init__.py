"""Review use cases."""

from .review_content import (
    ReviewContentRequest,
    ReviewContentResponse,
    ReviewContentUseCase,
)

__all__ = [
    "ReviewContentRequest",
    "ReviewContentResponse",
    "ReviewContentUseCase",
]
