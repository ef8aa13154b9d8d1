"""Get published tyrant use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.service import TyrantService, VoteService
from tyrantcam.domain.value import TyrantId

from .common import TyrantResponse


class GetTyrantRequest(BaseModel):
    """Get tyrant request."""

    tyrant_id: str  # UUID string
    fingerprint: Optional[str] = None


class GetTyrantUseCase(BaseUseCase):
    """Use case for viewing a single published tyrant."""

    def __init__(self, tyrant_service: TyrantService, vote_service: VoteService) -> None:
        self.tyrant_service = tyrant_service
        self.vote_service = vote_service

    async def execute(self, request: GetTyrantRequest) -> TyrantResponse:
        """Execute get tyrant flow.

        Raises:
            NotFoundError: If the tyrant doesn't exist or is unpublished
        """
        tyrant = await self.tyrant_service.get_published(
            TyrantId(UUID(request.tyrant_id))
        )

        has_voted = False
        if request.fingerprint:
            voted = await self.vote_service.voted_tyrant_ids(
                request.fingerprint, [tyrant.id]
            )
            has_voted = tyrant.id in voted

        return TyrantResponse.from_tyrant(tyrant, has_voted=has_voted)
