"""Submission use cases."""

from .common import SubmissionResponse
from .create_submission import (
    CreateSubmissionRequest,
    CreateSubmissionResponse,
    CreateSubmissionUseCase,
)
from .list_submissions import (
    ListSubmissionsRequest,
    ListSubmissionsResponse,
    ListSubmissionsUseCase,
    PendingCountRequest,
    PendingCountResponse,
    PendingCountUseCase,
)
from .review_submission import (
    ReviewDecision,
    ReviewSubmissionRequest,
    ReviewSubmissionResponse,
    ReviewSubmissionUseCase,
)

__all__ = [
    "CreateSubmissionRequest",
    "CreateSubmissionResponse",
    "CreateSubmissionUseCase",
    "ListSubmissionsRequest",
    "ListSubmissionsResponse",
    "ListSubmissionsUseCase",
    "PendingCountRequest",
    "PendingCountResponse",
    "PendingCountUseCase",
    "ReviewDecision",
    "ReviewSubmissionRequest",
    "ReviewSubmissionResponse",
    "ReviewSubmissionUseCase",
    "SubmissionResponse",
]
