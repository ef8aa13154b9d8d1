"""PostgreSQL implementation of AdminUser repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tyrantcam.domain.model import AdminUser
from tyrantcam.domain.repository import AdminUserRepository
from tyrantcam.domain.value import AdminUserId, Email
from tyrantcam.persistence.mappers import admin_user_to_dict, row_to_admin_user
from tyrantcam.persistence.tables import admin_users_table


class PostgresAdminUserRepository(AdminUserRepository):
    """PostgreSQL implementation of AdminUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, admin_id: AdminUserId) -> Optional[AdminUser]:
        """Find an administrator by ID."""
        stmt = select(admin_users_table).where(admin_users_table.c.id == admin_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[AdminUser]:
        """Find an administrator by (lowercased) email."""
        stmt = select(admin_users_table).where(admin_users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin_user(dict(row)) if row else None

    async def save(self, admin: AdminUser) -> AdminUser:
        """Create an administrator.

        Raises:
            IntegrityError: If the email is already registered
        """
        stmt = insert(admin_users_table).values(**admin_user_to_dict(admin))
        await self.session.execute(stmt)
        await self.session.flush()
        return admin
