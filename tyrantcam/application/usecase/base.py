"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from tyrantcam.domain.error import NotAuthorizedError
from tyrantcam.domain.value import AdminUserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_admin(admin_id: Optional[str], action: str) -> AdminUserId:
    """Return the admin ID, or raise if the caller is not an administrator.

    Args:
        admin_id: Admin ID taken from a verified token, None for anonymous callers
        action: Description of the guarded action, used in the error message

    Raises:
        NotAuthorizedError: If admin_id is missing
    """
    if not admin_id:
        raise NotAuthorizedError(action)
    return AdminUserId(UUID(admin_id))
