"""Create submission use case."""

from typing import Optional

from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase
from tyrantcam.domain.service import SubmissionService
from tyrantcam.domain.value import EvidenceFile, TyrantCategory


class CreateSubmissionRequest(BaseModel):
    """Create submission request."""

    tyrant_name: str = Field(min_length=2, max_length=100)
    tyrant_title: str = Field(min_length=1, max_length=150)
    category: TyrantCategory
    description: str = Field(min_length=20, max_length=5000)
    evidence_files: list[EvidenceFile] = Field(default_factory=list, max_length=10)
    reporter_contact: Optional[str] = None


class CreateSubmissionResponse(BaseModel):
    """Create submission response.

    Reporters only get an acknowledgement, not the stored record.
    """

    id: str
    status: str
    message: str


class CreateSubmissionUseCase(BaseUseCase):
    """Use case for a visitor reporting a tyrant."""

    def __init__(self, submission_service: SubmissionService) -> None:
        """Initialize create submission use case.

        Args:
            submission_service: Submission domain service
        """
        self.submission_service = submission_service

    async def execute(
        self, request: CreateSubmissionRequest
    ) -> CreateSubmissionResponse:
        """Queue the report for moderation.

        Raises:
            pydantic.ValidationError: If the reporter contact is not an email
        """
        submission = await self.submission_service.submit(
            tyrant_name=request.tyrant_name,
            tyrant_title=request.tyrant_title,
            category=request.category,
            description=request.description,
            evidence_files=request.evidence_files,
            reporter_contact=request.reporter_contact,
        )
        return CreateSubmissionResponse(
            id=str(submission.id),
            status=submission.status.value,
            message="Submission received and pending review",
        )
