"""PostgreSQL repository implementations."""

from tyrantcam.persistence.repository.admin_user import PostgresAdminUserRepository
from tyrantcam.persistence.repository.submission import PostgresSubmissionRepository
from tyrantcam.persistence.repository.tyrant import PostgresTyrantRepository
from tyrantcam.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAdminUserRepository",
    "PostgresSubmissionRepository",
    "PostgresTyrantRepository",
    "PostgresVoteRepository",
]
