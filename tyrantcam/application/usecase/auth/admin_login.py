"""Admin login use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.service import AdminService, JWTService


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)


class AdminLoginResponse(BaseModel):
    """Admin login response.

    The token is set as a cookie by the API layer and also returned for
    non-browser clients.
    """

    token: str
    admin_id: str
    email: str
    created_at: datetime


class AdminLoginUseCase(BaseUseCase):
    """Use case for administrator email/password login."""

    def __init__(self, admin_service: AdminService, jwt_service: JWTService) -> None:
        """Initialize admin login use case.

        Args:
            admin_service: Admin account domain service
            jwt_service: JWT token domain service
        """
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """Execute login flow.

        Steps:
        1. Check the email is not locked out
        2. Verify the password hash
        3. Issue an admin token

        Raises:
            TooManyAttemptsError: If the email is locked out
            InvalidCredentialsError: If the credentials don't match
        """
        with logfire.span("admin_login.execute"):
            admin = await self.admin_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.create_token(admin)
            return AdminLoginResponse(
                token=token,
                admin_id=str(admin.id),
                email=str(admin.email),
                created_at=admin.created_at,
            )
