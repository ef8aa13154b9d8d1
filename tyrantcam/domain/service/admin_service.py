"""Admin account domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from tyrantcam.domain.error import (
    InvalidCredentialsError,
    TooManyAttemptsError,
    ValidationError,
)
from tyrantcam.domain.model.admin_user import AdminUser
from tyrantcam.domain.repository import AdminUserRepository
from tyrantcam.domain.value import AdminUserId, Email
from tyrantcam.util.password import hash_password, verify_password

from .base import Service
from .login_rate_limiter import LoginRateLimiter

MIN_PASSWORD_LENGTH = 8


class AdminService(Service):
    """Domain service for administrator accounts and login."""

    def __init__(
        self,
        admin_repository: AdminUserRepository,
        rate_limiter: LoginRateLimiter,
    ) -> None:
        """Initialize admin service.

        Args:
            admin_repository: Admin user repository
            rate_limiter: Failed-login limiter shared across requests
        """
        self.admin_repository = admin_repository
        self.rate_limiter = rate_limiter

    async def create_admin(self, email: str, password: str) -> AdminUser:
        """Register an administrator.

        Raises:
            ValidationError: If the password is too short or the email is taken
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        admin = AdminUser(
            id=AdminUserId(uuid4()),
            email=Email(email),
            password_hash=hash_password(password),
            created_at=datetime.now(),
        )

        with logfire.span("admin_service.create_admin", email=str(admin.email)):
            try:
                saved = await self.admin_repository.save(admin)
            except IntegrityError:
                logfire.warn("Admin email already registered", email=str(admin.email))
                raise ValidationError(f"Admin already exists: {admin.email}")
            logfire.info("Admin created", admin_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> AdminUser:
        """Verify admin credentials.

        Raises:
            TooManyAttemptsError: If the email is locked out
            InvalidCredentialsError: If the email or password don't match
        """
        key = email.strip().lower()
        with logfire.span("admin_service.authenticate", email=key):
            retry_after = self.rate_limiter.retry_after(key)
            if retry_after:
                logfire.warn("Admin login locked out", email=key)
                raise TooManyAttemptsError(retry_after)

            admin = None
            try:
                admin = await self.admin_repository.find_by_email(Email(key))
            except ValueError:
                # Malformed email addresses simply never match
                pass

            if admin is None or not verify_password(password, admin.password_hash):
                self.rate_limiter.record_failure(key)
                logfire.warn("Admin login failed", email=key)
                raise InvalidCredentialsError()

            self.rate_limiter.clear(key)
            logfire.info("Admin authenticated", admin_id=str(admin.id))
            return admin

    async def get_admin(self, admin_id: AdminUserId) -> AdminUser | None:
        """Get an admin by ID."""
        return await self.admin_repository.find_by_id(admin_id)
