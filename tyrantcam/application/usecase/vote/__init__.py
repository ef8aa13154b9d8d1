"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .check_vote import CheckVoteRequest, CheckVoteResponse, CheckVoteUseCase
from .revoke_vote import RevokeVoteRequest, RevokeVoteResponse, RevokeVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "CheckVoteRequest",
    "CheckVoteResponse",
    "CheckVoteUseCase",
    "RevokeVoteRequest",
    "RevokeVoteResponse",
    "RevokeVoteUseCase",
]
