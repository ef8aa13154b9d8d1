"""Create tyrant use case (admin)."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase, require_admin
from tyrantcam.domain.service import TyrantService
from tyrantcam.domain.value import TyrantCategory

from .common import TyrantResponse


class CreateTyrantRequest(BaseModel):
    """Create tyrant request."""

    admin_id: Optional[str] = None
    name: str = Field(min_length=2, max_length=100)
    title: str = Field(min_length=1, max_length=150)
    position: str = Field(min_length=1, max_length=150)
    category: TyrantCategory
    description: str = Field(min_length=10, max_length=5000)
    image_url: Optional[str] = None
    evidence_urls: list[str] = Field(default_factory=list)
    is_published: bool = False


class CreateTyrantUseCase(BaseUseCase):
    """Use case for an administrator adding a tyrant directly."""

    def __init__(self, tyrant_service: TyrantService) -> None:
        """Initialize create tyrant use case.

        Args:
            tyrant_service: Tyrant domain service
        """
        self.tyrant_service = tyrant_service

    async def execute(self, request: CreateTyrantRequest) -> TyrantResponse:
        """Execute create flow.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
        """
        admin_id = require_admin(request.admin_id, "create tyrants")

        with logfire.span("create_tyrant.execute", admin_id=str(admin_id)):
            tyrant = await self.tyrant_service.create_tyrant(
                name=request.name.strip(),
                title=request.title.strip(),
                position=request.position.strip(),
                category=request.category,
                description=request.description.strip(),
                image_url=request.image_url,
                evidence_urls=request.evidence_urls,
                is_published=request.is_published,
            )
            return TyrantResponse.from_tyrant(tyrant)
