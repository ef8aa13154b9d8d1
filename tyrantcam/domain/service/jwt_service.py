"""JWT token domain service."""

import logfire

from tyrantcam.config import AuthSettings
from tyrantcam.domain.model.admin_user import AdminUser
from tyrantcam.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for admin session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, admin: AdminUser) -> str:
        """Create a session token for an admin."""
        with logfire.span("jwt_service.create_token", admin_id=str(admin.id)):
            return create_token(str(admin.id), str(admin.email), self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify token and extract payload.

        Raises:
            JWTError: If token is invalid, expired or not an admin token
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_admin_id_from_token(self, token: str | None) -> str | None:
        """Extract the admin ID from a token without raising.

        Returns:
            Admin ID if token is a valid admin token, None otherwise
        """
        if not token:
            return None

        try:
            return self.verify_token(token).sub
        except Exception as e:
            logfire.debug("Treating request as anonymous", error=str(e))
            return None
