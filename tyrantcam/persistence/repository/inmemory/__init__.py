"""In-memory repository implementations for testing."""

from .admin_user import InMemoryAdminUserRepository
from .store import InMemoryStore
from .submission import InMemorySubmissionRepository
from .tyrant import InMemoryTyrantRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAdminUserRepository",
    "InMemoryStore",
    "InMemorySubmissionRepository",
    "InMemoryTyrantRepository",
    "InMemoryVoteRepository",
]
