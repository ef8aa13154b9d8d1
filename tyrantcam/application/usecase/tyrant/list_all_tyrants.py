"""List all tyrants use case (admin)."""

from typing import Optional

from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase, require_admin
from tyrantcam.domain.service import TyrantService

from .common import TyrantListResponse, TyrantResponse


class ListAllTyrantsRequest(BaseModel):
    """List all tyrants request."""

    admin_id: Optional[str] = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListAllTyrantsUseCase(BaseUseCase):
    """Use case for the admin view of every tyrant, drafts included."""

    def __init__(self, tyrant_service: TyrantService) -> None:
        self.tyrant_service = tyrant_service

    async def execute(self, request: ListAllTyrantsRequest) -> TyrantListResponse:
        """Execute admin listing.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
        """
        require_admin(request.admin_id, "list draft tyrants")
        tyrants = await self.tyrant_service.list_all(
            limit=request.limit, offset=request.offset
        )
        return TyrantListResponse(
            tyrants=[TyrantResponse.from_tyrant(t) for t in tyrants],
            total=len(tyrants),
            limit=request.limit,
            offset=request.offset,
        )
