"""Cast vote use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.model.vote import VoteOutcome
from tyrantcam.domain.service import TyrantService, VoteService
from tyrantcam.domain.value import TyrantId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    tyrant_id: str  # UUID string
    fingerprint: str  # Visitor fingerprint computed by the API layer


class CastVoteResponse(BaseModel):
    """Cast vote response.

    already_voted is True for the duplicate outcome, which callers show as
    the normal "already shamed" state rather than an error.
    """

    outcome: VoteOutcome
    tyrant_id: str
    shame_count: Optional[int] = None
    already_voted: bool = False
    vote_id: Optional[str] = None
    created_at: Optional[datetime] = None
    detail: Optional[str] = None


class CastVoteUseCase(BaseUseCase):
    """Use case for shaming a tyrant."""

    def __init__(self, vote_service: VoteService, tyrant_service: TyrantService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            tyrant_service: Tyrant domain service (visibility, current count)
        """
        self.vote_service = vote_service
        self.tyrant_service = tyrant_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Response tagged with the vote outcome
        """
        tyrant_id = TyrantId(UUID(request.tyrant_id))

        with logfire.span("cast_vote.execute", tyrant_id=request.tyrant_id):
            # Drafts are hidden from visitors
            tyrant = await self.tyrant_service.get_tyrant(tyrant_id)
            if tyrant is not None and not tyrant.is_published:
                return CastVoteResponse(
                    outcome=VoteOutcome.NOT_FOUND,
                    tyrant_id=request.tyrant_id,
                    detail="Tyrant not found",
                )

            result = await self.vote_service.cast_vote(tyrant_id, request.fingerprint)

            if result.outcome == VoteOutcome.CAST and result.vote is not None:
                return CastVoteResponse(
                    outcome=result.outcome,
                    tyrant_id=request.tyrant_id,
                    shame_count=result.shame_count,
                    already_voted=False,
                    vote_id=str(result.vote.id),
                    created_at=result.vote.created_at,
                )

            shame_count = None
            if result.outcome == VoteOutcome.DUPLICATE_VOTE:
                tyrant = await self.tyrant_service.get_tyrant(tyrant_id)
                shame_count = tyrant.shame_count if tyrant else None

            return CastVoteResponse(
                outcome=result.outcome,
                tyrant_id=request.tyrant_id,
                shame_count=shame_count,
                already_voted=result.outcome == VoteOutcome.DUPLICATE_VOTE,
                detail=result.detail,
            )
