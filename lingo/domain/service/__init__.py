"""Domain services."""

from .base import Service
from .content_service import ContentService
from .jwt_service import JWTService
from .review_service import ReviewService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "ContentService",
    "JWTService",
    "ReviewService",
    "Service",
    "UserService",
    "VoteService",
]
