"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .clear_vote import ClearVoteRequest, ClearVoteResponse, ClearVoteUseCase
from .common import VoteSummary
from .get_vote_summary import (
    GetVoteSummaryRequest,
    GetVoteSummaryResponse,
    GetVoteSummaryUseCase,
)
from .list_approved_with_votes import (
    ContentWithVotesItem,
    ListApprovedWithVotesRequest,
    ListApprovedWithVotesResponse,
    ListApprovedWithVotesUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "ClearVoteRequest",
    "ClearVoteResponse",
    "ClearVoteUseCase",
    "ContentWithVotesItem",
    "GetVoteSummaryRequest",
    "GetVoteSummaryResponse",
    "GetVoteSummaryUseCase",
    "ListApprovedWithVotesRequest",
    "ListApprovedWithVotesResponse",
    "ListApprovedWithVotesUseCase",
    "VoteSummary",
]
