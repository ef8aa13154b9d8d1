"""Review submission use case (admin)."""

from enum import Enum
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase, require_admin
from tyrantcam.application.usecase.tyrant.common import TyrantResponse
from tyrantcam.domain.service import SubmissionService
from tyrantcam.domain.value import SubmissionId

from .common import SubmissionResponse


class ReviewDecision(str, Enum):
    """Moderator decision."""

    APPROVE = "approve"
    REJECT = "reject"


class ReviewSubmissionRequest(BaseModel):
    """Review submission request."""

    admin_id: Optional[str] = None
    submission_id: str  # UUID string
    decision: ReviewDecision
    notes: Optional[str] = Field(default=None, max_length=5000)


class ReviewSubmissionResponse(BaseModel):
    """Review submission response.

    tyrant is the unpublished draft created on approval.
    """

    submission: SubmissionResponse
    tyrant: Optional[TyrantResponse] = None


class ReviewSubmissionUseCase(BaseUseCase):
    """Use case for approving or rejecting a pending submission."""

    def __init__(self, submission_service: SubmissionService) -> None:
        """Initialize review submission use case.

        Args:
            submission_service: Submission domain service
        """
        self.submission_service = submission_service

    async def execute(
        self, request: ReviewSubmissionRequest
    ) -> ReviewSubmissionResponse:
        """Execute review flow.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If the submission doesn't exist
            InvalidTransitionError: If the submission was already reviewed
        """
        reviewer = require_admin(request.admin_id, "review submissions")
        submission_id = SubmissionId(UUID(request.submission_id))

        with logfire.span(
            "review_submission.execute",
            submission_id=request.submission_id,
            decision=request.decision.value,
        ):
            if request.decision == ReviewDecision.APPROVE:
                submission, tyrant = await self.submission_service.approve(
                    submission_id, reviewer, request.notes
                )
                return ReviewSubmissionResponse(
                    submission=SubmissionResponse.from_submission(submission),
                    tyrant=TyrantResponse.from_tyrant(tyrant),
                )

            submission = await self.submission_service.reject(
                submission_id, reviewer, request.notes
            )
            return ReviewSubmissionResponse(
                submission=SubmissionResponse.from_submission(submission)
            )
