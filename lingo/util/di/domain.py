"""Domain layer DI providers."""

from dishka import Scope, provide

from lingo.config import AuthSettings, ContentSettings
from lingo.domain.repository import (
    ContentRepository,
    UserRepository,
    VoteRepository,
)
from lingo.domain.service import (
    ContentService,
    JWTService,
    ReviewService,
    UserService,
    VoteService,
)
from lingo.util.di.base import ProviderBase
from lingo.util.retry import ReadRetry


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_content_service(
        self,
        content_repository: ContentRepository,
        content_settings: ContentSettings,
        read_retry: ReadRetry,
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            content_repository=content_repository,
            content_settings=content_settings,
            read_retry=read_retry,
        )

    @provide
    def get_review_service(self, content_service: ContentService) -> ReviewService:
        """Provide review queue domain service."""
        return ReviewService(content_service=content_service)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        content_service: ContentService,
        read_retry: ReadRetry,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            content_service=content_service,
            read_retry=read_retry,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            seed_moderators=auth_settings.seed_moderators,
        )
