"""List published tyrants use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.service import TyrantService, VoteService
from tyrantcam.domain.value import TyrantCategory

from .common import TyrantListResponse, TyrantResponse


class ListTyrantsRequest(BaseModel):
    """List tyrants request."""

    category: Optional[TyrantCategory] = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    fingerprint: Optional[str] = None  # Marks tyrants the visitor already shamed


class ListTyrantsUseCase(BaseUseCase):
    """Use case for the public leaderboard of published tyrants."""

    def __init__(self, tyrant_service: TyrantService, vote_service: VoteService) -> None:
        """Initialize list tyrants use case.

        Args:
            tyrant_service: Tyrant domain service
            vote_service: Vote domain service
        """
        self.tyrant_service = tyrant_service
        self.vote_service = vote_service

    async def execute(self, request: ListTyrantsRequest) -> TyrantListResponse:
        """Execute list flow.

        Returns:
            Published tyrants, most shamed first, with the visitor's vote state
        """
        with logfire.span(
            "list_tyrants.execute",
            category=request.category.value if request.category else None,
        ):
            tyrants = await self.tyrant_service.list_published(
                category=request.category,
                limit=request.limit,
                offset=request.offset,
            )
            total = await self.tyrant_service.count_published(category=request.category)

            voted: set = set()
            if request.fingerprint:
                voted = await self.vote_service.voted_tyrant_ids(
                    request.fingerprint, [t.id for t in tyrants]
                )

            return TyrantListResponse(
                tyrants=[
                    TyrantResponse.from_tyrant(t, has_voted=t.id in voted)
                    for t in tyrants
                ],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
