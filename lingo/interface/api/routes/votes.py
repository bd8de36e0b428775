"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from lingo.application.usecase.auth import GetCurrentUserUseCase
from lingo.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    ClearVoteRequest,
    ClearVoteResponse,
    ClearVoteUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryResponse,
    GetVoteSummaryUseCase,
    ListApprovedWithVotesRequest,
    ListApprovedWithVotesResponse,
    ListApprovedWithVotesUseCase,
)
from lingo.interface.api.auth import authenticate

router = APIRouter(prefix="/contents", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    vote_type: str  # THUMBS_UP or THUMBS_DOWN


@router.get("/approved-with-votes", response_model=ListApprovedWithVotesResponse)
async def list_approved_with_votes(
    list_use_case: FromDishka[ListApprovedWithVotesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListApprovedWithVotesResponse:
    """List the dictionary with thumbs counts and the caller's own votes.

    Requires authentication.
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await list_use_case.execute(
        ListApprovedWithVotesRequest(user_id=user.user_id)
    )


@router.post("/{content_id}/votes", response_model=CastVoteResponse)
async def cast_vote(
    content_id: int,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote thumbs up or down on an approved term.

    Requires authentication. Voting again with the other type switches the
    vote; voting again with the same type changes nothing.

    Args:
        content_id: Content ID
        request: Vote type
        cast_vote_use_case: Cast vote use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Tally after the vote
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            content_id=content_id,
            vote_type=request.vote_type,
            user_id=user.user_id,
        )
    )


@router.delete("/{content_id}/votes", response_model=ClearVoteResponse)
async def clear_vote(
    content_id: int,
    clear_vote_use_case: FromDishka[ClearVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ClearVoteResponse:
    """Withdraw the caller's vote. Succeeds even if there was none.

    Requires authentication.
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await clear_vote_use_case.execute(
        ClearVoteRequest(content_id=content_id, user_id=user.user_id)
    )


@router.get("/{content_id}/votes", response_model=GetVoteSummaryResponse)
async def get_vote_summary(
    content_id: int,
    vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetVoteSummaryResponse:
    """Get thumbs counts for one item and the caller's own vote.

    Requires authentication.
    """
    user = await authenticate(get_current_user_use_case, auth_token, authorization)
    return await vote_summary_use_case.execute(
        GetVoteSummaryRequest(content_id=content_id, user_id=user.user_id)
    )
