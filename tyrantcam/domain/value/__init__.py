"""Domain value objects for TyrantCam."""

from tyrantcam.domain.value.identifiers import (
    AdminUserId,
    SubmissionId,
    TyrantId,
    VoteId,
)
from tyrantcam.domain.value.types import (
    Email,
    EvidenceFile,
    Fingerprint,
    SubmissionStatus,
    TyrantCategory,
)

__all__ = [
    # Identifiers
    "TyrantId",
    "VoteId",
    "SubmissionId",
    "AdminUserId",
    # Types
    "TyrantCategory",
    "SubmissionStatus",
    "Fingerprint",
    "Email",
    "EvidenceFile",
]
