"""Content use cases."""

from .check_duplicates import (
    CheckDuplicatesRequest,
    CheckDuplicatesResponse,
    CheckDuplicatesUseCase,
)
from .common import ContentItem
from .get_content import GetContentRequest, GetContentResponse, GetContentUseCase
from .list_approved import ListApprovedResponse, ListApprovedUseCase
from .list_pending import (
    ListPendingPageRequest,
    ListPendingPageResponse,
    ListPendingPageUseCase,
    ListPendingResponse,
    ListPendingUseCase,
)
from .search_content import (
    SearchContentRequest,
    SearchContentResponse,
    SearchContentUseCase,
)
from .submit_content import (
    SubmitContentRequest,
    SubmitContentResponse,
    SubmitContentUseCase,
)

__all__ = [
    "CheckDuplicatesRequest",
    "CheckDuplicatesResponse",
    "CheckDuplicatesUseCase",
    "ContentItem",
    "GetContentRequest",
    "GetContentResponse",
    "GetContentUseCase",
    "ListApprovedResponse",
    "ListApprovedUseCase",
    "ListPendingPageRequest",
    "ListPendingPageResponse",
    "ListPendingPageUseCase",
    "ListPendingResponse",
    "ListPendingUseCase",
    "SearchContentRequest",
    "SearchContentResponse",
    "SearchContentUseCase",
    "SubmitContentRequest",
    "SubmitContentResponse",
    "SubmitContentUseCase",
]
