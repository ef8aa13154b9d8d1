"""Revoke vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.model.vote import VoteOutcome
from tyrantcam.domain.service import VoteService
from tyrantcam.domain.value import VoteId


class RevokeVoteRequest(BaseModel):
    """Revoke vote request."""

    vote_id: str  # UUID string
    admin_id: Optional[str] = None  # Set only for verified admin tokens


class RevokeVoteResponse(BaseModel):
    """Revoke vote response."""

    outcome: VoteOutcome
    vote_id: str
    tyrant_id: Optional[str] = None
    detail: Optional[str] = None


class RevokeVoteUseCase(BaseUseCase):
    """Use case for an administrator removing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize revoke vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RevokeVoteRequest) -> RevokeVoteResponse:
        """Execute revoke vote flow.

        The admin guard lives in the vote service, so this passes the
        caller's admin status through instead of raising.
        """
        result = await self.vote_service.revoke_vote(
            VoteId(UUID(request.vote_id)), is_admin=request.admin_id is not None
        )
        return RevokeVoteResponse(
            outcome=result.outcome,
            vote_id=request.vote_id,
            tyrant_id=str(result.tyrant_id) if result.tyrant_id else None,
            detail=result.detail,
        )
