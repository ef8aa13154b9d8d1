"""In-memory admin user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from tyrantcam.domain.model.admin_user import AdminUser
from tyrantcam.domain.repository.admin_user import AdminUserRepository
from tyrantcam.domain.value import AdminUserId, Email

from .store import InMemoryStore


class InMemoryAdminUserRepository(AdminUserRepository):
    """In-memory implementation of AdminUserRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, admin_id: AdminUserId) -> Optional[AdminUser]:
        """Find an administrator by ID."""
        return self._store.admin_users.get(admin_id)

    async def find_by_email(self, email: Email) -> Optional[AdminUser]:
        """Find an administrator by email."""
        for admin in self._store.admin_users.values():
            if admin.email == email:
                return admin
        return None

    async def save(self, admin: AdminUser) -> AdminUser:
        """Create an administrator.

        Raises:
            IntegrityError: If the email is already registered
        """
        if await self.find_by_email(admin.email):
            raise IntegrityError("Duplicate email", None, Exception())
        self._store.admin_users[admin.id] = admin
        return admin
