"""Check vote use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.service import VoteService
from tyrantcam.domain.value import TyrantId


class CheckVoteRequest(BaseModel):
    """Check vote request."""

    tyrant_id: str  # UUID string
    fingerprint: str
    window_hours: int = Field(default=24, ge=1)


class CheckVoteResponse(BaseModel):
    """Check vote response."""

    tyrant_id: str
    has_voted: bool
    window_hours: int


class CheckVoteUseCase(BaseUseCase):
    """Use case for "did this visitor shame this tyrant recently"."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: CheckVoteRequest) -> CheckVoteResponse:
        has_voted = await self.vote_service.has_voted(
            TyrantId(UUID(request.tyrant_id)),
            request.fingerprint,
            window_hours=request.window_hours,
        )
        return CheckVoteResponse(
            tyrant_id=request.tyrant_id,
            has_voted=has_voted,
            window_hours=request.window_hours,
        )
