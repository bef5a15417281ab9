"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_state import (
    GetVoteStateRequest,
    GetVoteStateResponse,
    GetVoteStateUseCase,
)
from .revoke_vote import RevokeVoteRequest, RevokeVoteResponse, RevokeVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteStateRequest",
    "GetVoteStateResponse",
    "GetVoteStateUseCase",
    "RevokeVoteRequest",
    "RevokeVoteResponse",
    "RevokeVoteUseCase",
]
