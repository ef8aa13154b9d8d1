"""Publish/unpublish tyrant use case (admin)."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from tyrantcam.application.usecase.base import BaseUseCase, require_admin
from tyrantcam.domain.service import TyrantService
from tyrantcam.domain.value import TyrantId

from .common import TyrantResponse


class SetPublicationRequest(BaseModel):
    """Set publication request."""

    admin_id: Optional[str] = None
    tyrant_id: str  # UUID string
    is_published: bool


class SetPublicationUseCase(BaseUseCase):
    """Use case for publishing or hiding a tyrant."""

    def __init__(self, tyrant_service: TyrantService) -> None:
        self.tyrant_service = tyrant_service

    async def execute(self, request: SetPublicationRequest) -> TyrantResponse:
        """Execute publication change.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If the tyrant doesn't exist
        """
        require_admin(request.admin_id, "publish tyrants")
        tyrant = await self.tyrant_service.set_published(
            TyrantId(UUID(request.tyrant_id)), request.is_published
        )
        return TyrantResponse.from_tyrant(tyrant)
