"""Delete tyrant use case (admin)."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from tyrantcam.application.usecase.base import BaseUseCase, require_admin
from tyrantcam.domain.service import TyrantService
from tyrantcam.domain.value import TyrantId


class DeleteTyrantRequest(BaseModel):
    """Delete tyrant request."""

    admin_id: Optional[str] = None
    tyrant_id: str  # UUID string


class DeleteTyrantResponse(BaseModel):
    """Delete tyrant response."""

    success: bool
    tyrant_id: str


class DeleteTyrantUseCase(BaseUseCase):
    """Use case for removing a tyrant and all of its votes."""

    def __init__(self, tyrant_service: TyrantService) -> None:
        self.tyrant_service = tyrant_service

    async def execute(self, request: DeleteTyrantRequest) -> DeleteTyrantResponse:
        """Execute delete flow.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If the tyrant doesn't exist
        """
        require_admin(request.admin_id, "delete tyrants")
        await self.tyrant_service.delete_tyrant(TyrantId(UUID(request.tyrant_id)))
        return DeleteTyrantResponse(success=True, tyrant_id=request.tyrant_id)
