"""Domain model entities for TyrantCam."""

from tyrantcam.domain.model.admin_user import AdminUser
from tyrantcam.domain.model.submission import Submission
from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.model.vote import (
    CastVoteResult,
    RevokeVoteResult,
    Vote,
    VoteOutcome,
)

__all__ = [
    "AdminUser",
    "Submission",
    "Tyrant",
    "Vote",
    "VoteOutcome",
    "CastVoteResult",
    "RevokeVoteResult",
]
