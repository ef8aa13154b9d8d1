"""Admin user repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tyrantcam.domain.model.admin_user import AdminUser
from tyrantcam.domain.value import AdminUserId, Email


class AdminUserRepository(ABC):
    """Repository for administrator accounts."""

    @abstractmethod
    async def find_by_id(self, admin_id: AdminUserId) -> Optional[AdminUser]:
        """Find an admin by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[AdminUser]:
        """Find an admin by email address."""
        pass

    @abstractmethod
    async def save(self, admin: AdminUser) -> AdminUser:
        """Create an admin.

        Raises:
            IntegrityError: If the email is already registered
        """
        pass
