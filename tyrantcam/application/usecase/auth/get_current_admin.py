"""Get current admin use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.error import NotFoundError
from tyrantcam.domain.service import AdminService, JWTService
from tyrantcam.domain.value import AdminUserId


class GetCurrentAdminRequest(BaseModel):
    """Get current admin request."""

    token: str  # JWT token


class GetCurrentAdminResponse(BaseModel):
    """Get current admin response."""

    admin_id: str
    email: str
    created_at: datetime


class GetCurrentAdminUseCase(BaseUseCase):
    """Use case for resolving the admin behind a session token."""

    def __init__(self, jwt_service: JWTService, admin_service: AdminService) -> None:
        """Initialize get current admin use case.

        Args:
            jwt_service: JWT token domain service
            admin_service: Admin account domain service
        """
        self.jwt_service = jwt_service
        self.admin_service = admin_service

    async def execute(self, request: GetCurrentAdminRequest) -> GetCurrentAdminResponse:
        """Execute get current admin flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the admin account no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)

        admin = await self.admin_service.get_admin(AdminUserId(UUID(payload.sub)))
        if admin is None:
            raise NotFoundError("Admin", payload.sub)

        return GetCurrentAdminResponse(
            admin_id=str(admin.id),
            email=str(admin.email),
            created_at=admin.created_at,
        )
