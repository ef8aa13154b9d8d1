"""Admin authentication use cases."""

from .admin_login import AdminLoginRequest, AdminLoginResponse, AdminLoginUseCase
from .get_current_admin import (
    GetCurrentAdminRequest,
    GetCurrentAdminResponse,
    GetCurrentAdminUseCase,
)

__all__ = [
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminLoginUseCase",
    "GetCurrentAdminRequest",
    "GetCurrentAdminResponse",
    "GetCurrentAdminUseCase",
]
