"""Response models shared by submission use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tyrantcam.domain.model.submission import Submission
from tyrantcam.domain.value import EvidenceFile, SubmissionStatus, TyrantCategory


class SubmissionResponse(BaseModel):
    """Submission as returned by the API."""

    id: str
    tyrant_name: str
    tyrant_title: str
    category: TyrantCategory
    description: str
    evidence_files: list[EvidenceFile]
    reporter_contact: Optional[str]
    status: SubmissionStatus
    admin_notes: Optional[str]
    submitted_at: datetime
    reviewed_at: Optional[datetime]
    reviewed_by: Optional[str]
    tyrant_id: Optional[str]

    @classmethod
    def from_submission(cls, submission: Submission) -> "SubmissionResponse":
        """Build the response from a domain model."""
        return cls(
            id=str(submission.id),
            tyrant_name=submission.tyrant_name,
            tyrant_title=submission.tyrant_title,
            category=submission.category,
            description=submission.description,
            evidence_files=list(submission.evidence_files),
            reporter_contact=submission.reporter_contact,
            status=submission.status,
            admin_notes=submission.admin_notes,
            submitted_at=submission.submitted_at,
            reviewed_at=submission.reviewed_at,
            reviewed_by=str(submission.reviewed_by) if submission.reviewed_by else None,
            tyrant_id=str(submission.tyrant_id) if submission.tyrant_id else None,
        )
