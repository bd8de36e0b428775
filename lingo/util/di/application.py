"""Application layer DI providers."""

from dishka import Scope, provide

from lingo.application.usecase.auth import GetCurrentUserUseCase
from lingo.application.usecase.content import (
    CheckDuplicatesUseCase,
    GetContentUseCase,
    ListApprovedUseCase,
    ListPendingPageUseCase,
    ListPendingUseCase,
    SearchContentUseCase,
    SubmitContentUseCase,
)
from lingo.application.usecase.review import ReviewContentUseCase
from lingo.application.usecase.user import UpdateCurrentUserUseCase
from lingo.application.usecase.vote import (
    CastVoteUseCase,
    ClearVoteUseCase,
    GetVoteSummaryUseCase,
    ListApprovedWithVotesUseCase,
)
from lingo.domain.service import (
    ContentService,
    JWTService,
    ReviewService,
    UserService,
    VoteService,
)
from lingo.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_current_user_use_case(
        self, user_service: UserService
    ) -> UpdateCurrentUserUseCase:
        """Provide update current user use case."""
        return UpdateCurrentUserUseCase(user_service=user_service)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_content_use_case(
        self, content_service: ContentService
    ) -> SubmitContentUseCase:
        """Provide submit content use case."""
        return SubmitContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_get_content_use_case(
        self, content_service: ContentService
    ) -> GetContentUseCase:
        """Provide get content use case."""
        return GetContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_list_approved_use_case(
        self, content_service: ContentService
    ) -> ListApprovedUseCase:
        """Provide list approved use case."""
        return ListApprovedUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_search_content_use_case(
        self, content_service: ContentService
    ) -> SearchContentUseCase:
        """Provide search content use case."""
        return SearchContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_check_duplicates_use_case(
        self, content_service: ContentService
    ) -> CheckDuplicatesUseCase:
        """Provide duplicate check use case."""
        return CheckDuplicatesUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_use_case(
        self, content_service: ContentService
    ) -> ListPendingUseCase:
        """Provide list pending use case."""
        return ListPendingUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_page_use_case(
        self, review_service: ReviewService, content_service: ContentService
    ) -> ListPendingPageUseCase:
        """Provide pending page use case."""
        return ListPendingPageUseCase(
            review_service=review_service, content_service=content_service
        )

    # Review use cases
    @provide(scope=Scope.REQUEST)
    def get_review_content_use_case(
        self, review_service: ReviewService
    ) -> ReviewContentUseCase:
        """Provide review content use case."""
        return ReviewContentUseCase(review_service=review_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_vote_use_case(self, vote_service: VoteService) -> ClearVoteUseCase:
        """Provide clear vote use case."""
        return ClearVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_summary_use_case(
        self, vote_service: VoteService
    ) -> GetVoteSummaryUseCase:
        """Provide vote summary use case."""
        return GetVoteSummaryUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_approved_with_votes_use_case(
        self, vote_service: VoteService
    ) -> ListApprovedWithVotesUseCase:
        """Provide list approved with votes use case."""
        return ListApprovedWithVotesUseCase(vote_service=vote_service)
