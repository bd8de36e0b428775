"""Content submission, browsing and review routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from lingo.application.usecase.auth import GetCurrentUserUseCase
from lingo.application.usecase.content import (
    CheckDuplicatesRequest,
    CheckDuplicatesResponse,
    CheckDuplicatesUseCase,
    GetContentRequest,
    GetContentResponse,
    GetContentUseCase,
    ListApprovedResponse,
    ListApprovedUseCase,
    ListPendingPageRequest,
    ListPendingPageResponse,
    ListPendingPageUseCase,
    ListPendingResponse,
    ListPendingUseCase,
    SearchContentRequest,
    SearchContentResponse,
    SearchContentUseCase,
    SubmitContentRequest,
    SubmitContentResponse,
    SubmitContentUseCase,
)
from lingo.application.usecase.review import (
    ReviewContentRequest,
    ReviewContentResponse,
    ReviewContentUseCase,
)
from lingo.interface.api.auth import (
    authenticate,
    require_contributor,
    require_moderator,
)

router = APIRouter(prefix="/contents", tags=["contents"], route_class=DishkaRoute)


class SubmitContentAPIRequest(BaseModel):
    """API request for submitting a term.

    Lengths are checked after trimming by the domain.
    """

    term: str
    definition: str
    example: str | None = None


class ReviewContentAPIRequest(BaseModel):
    """API request for reviewing a term."""

    decision: str  # APPROVE/APPROVED or REJECT/REJECTED
    comment: str | None = Field(default=None)


@router.post(
    "",
    response_model=SubmitContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_content(
    request: SubmitContentAPIRequest,
    submit_content_use_case: FromDishka[SubmitContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SubmitContentResponse:
    """Submit a new term for review.

    Requires a contributor role. The item starts PENDING and is hidden from
    the dictionary until a moderator approves it.

    Args:
        request: Term, definition and optional example
        submit_content_use_case: Submit content use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        The created item

    Example:
        POST /contents
        {
            "term": "Rizz",
            "definition": "Charm or skill in attracting a partner",
            "example": "He has unspoken rizz."
        }
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    require_contributor(user)

    return await submit_content_use_case.execute(
        SubmitContentRequest(
            term=request.term,
            definition=request.definition,
            example=request.example,
            submitted_by=user.email,
        )
    )


@router.get("/approved", response_model=ListApprovedResponse)
async def list_approved(
    list_approved_use_case: FromDishka[ListApprovedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListApprovedResponse:
    """List every approved term (the dictionary).

    Requires an authenticated user of any role.
    """
    await authenticate(get_current_user_use_case, auth_token, authorization)
    return await list_approved_use_case.execute()


@router.get("/search", response_model=SearchContentResponse)
async def search_content(
    search_content_use_case: FromDishka[SearchContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    q: str = Query(default="", max_length=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SearchContentResponse:
    """Search approved terms by term, definition or example."""
    await authenticate(get_current_user_use_case, auth_token, authorization)
    return await search_content_use_case.execute(SearchContentRequest(query=q))


@router.get("/duplicates", response_model=CheckDuplicatesResponse)
async def check_duplicates(
    check_duplicates_use_case: FromDishka[CheckDuplicatesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    term: str = Query(default=""),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CheckDuplicatesResponse:
    """Check whether a term already exists in the dictionary.

    Advisory: the frontend warns but may still submit.
    """
    await authenticate(get_current_user_use_case, auth_token, authorization)
    return await check_duplicates_use_case.execute(CheckDuplicatesRequest(term=term))


@router.get("/pending", response_model=ListPendingResponse)
async def list_pending(
    list_pending_use_case: FromDishka[ListPendingUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListPendingResponse:
    """List the whole pending queue, oldest first.

    Requires a moderator role.
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    require_moderator(user)
    return await list_pending_use_case.execute()


@router.get("/pending/paginated", response_model=ListPendingPageResponse)
async def list_pending_page(
    list_pending_page_use_case: FromDishka[ListPendingPageUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = Query(default=0),
    size: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListPendingPageResponse:
    """Get one page of the pending queue, oldest first.

    Requires a moderator role. page is zero-based; size is clamped to
    [1, content.max_page_size].
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    require_moderator(user)
    return await list_pending_page_use_case.execute(
        ListPendingPageRequest(page=page, size=size)
    )


@router.get("/{content_id}", response_model=GetContentResponse)
async def get_content(
    content_id: int,
    get_content_use_case: FromDishka[GetContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetContentResponse:
    """Get one content item by ID.

    Pending and rejected items are 404 unless the caller is a moderator or
    submitted the item.
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await get_content_use_case.execute(
        GetContentRequest(
            content_id=content_id,
            viewer=user.email,
            viewer_can_moderate=user.can_moderate,
        )
    )


@router.put("/{content_id}/review", response_model=ReviewContentResponse)
async def review_content(
    content_id: int,
    request: ReviewContentAPIRequest,
    review_content_use_case: FromDishka[ReviewContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReviewContentResponse:
    """Approve or reject a pending term.

    Requires a moderator role. A comment is required when rejecting.
    Reviewing an item that was already reviewed returns 409.

    Example:
        PUT /contents/7/review
        {"decision": "REJECT", "comment": "Too vague"}
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    require_moderator(user)

    return await review_content_use_case.execute(
        ReviewContentRequest(
            content_id=content_id,
            decision=request.decision,
            comment=request.comment,
            reviewer=user.email,
        )
    )
