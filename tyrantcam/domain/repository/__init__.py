"""Repository interfaces for the TyrantCam domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tyrantcam.domain.repository.admin_user import AdminUserRepository
from tyrantcam.domain.repository.submission import SubmissionRepository
from tyrantcam.domain.repository.tyrant import TyrantRepository
from tyrantcam.domain.repository.vote import VoteRepository

__all__ = [
    "AdminUserRepository",
    "SubmissionRepository",
    "TyrantRepository",
    "VoteRepository",
]
