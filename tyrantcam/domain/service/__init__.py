"""Domain services."""

from .admin_service import AdminService
from .base import Service
from .jwt_service import JWTService
from .login_rate_limiter import LoginRateLimiter
from .submission_service import SubmissionService
from .tyrant_service import TyrantService
from .vote_service import VoteService

__all__ = [
    "AdminService",
    "JWTService",
    "LoginRateLimiter",
    "Service",
    "SubmissionService",
    "TyrantService",
    "VoteService",
]
