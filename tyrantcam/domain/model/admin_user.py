"""Admin user entity."""

from datetime import datetime

from pydantic import Field

from tyrantcam.domain.model.common import DomainModel
from tyrantcam.domain.value import AdminUserId, Email


class AdminUser(DomainModel):
    """Administrator account used to moderate submissions and entries."""

    id: AdminUserId
    email: Email
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
