"""Submission entity.

Submissions are public reports waiting for moderation. Anyone can create
one; only an administrator can approve or reject it, and only while it is
still pending.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from tyrantcam.domain.error import InvalidTransitionError
from tyrantcam.domain.model.common import DomainModel
from tyrantcam.domain.value.types import EMAIL_PATTERN
from tyrantcam.domain.value import (
    AdminUserId,
    EvidenceFile,
    SubmissionId,
    SubmissionStatus,
    TyrantCategory,
    TyrantId,
)


class Submission(DomainModel):
    """Submission entity."""

    id: SubmissionId
    tyrant_name: str = Field(min_length=2, max_length=100)
    tyrant_title: str = Field(min_length=1, max_length=150)
    category: TyrantCategory
    description: str = Field(min_length=20, max_length=5000)
    evidence_files: list[EvidenceFile] = Field(default_factory=list)
    reporter_contact: Optional[str] = None
    status: SubmissionStatus = SubmissionStatus.PENDING
    admin_notes: Optional[str] = Field(default=None, max_length=5000)
    submitted_at: datetime = Field(default_factory=datetime.now)
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[AdminUserId] = None
    tyrant_id: Optional[TyrantId] = None  # Entry created on approval

    @field_validator("reporter_contact")
    @classmethod
    def validate_reporter_contact(cls, v: Optional[str]) -> Optional[str]:
        """Blank contact means anonymous; otherwise it must be an email."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not EMAIL_PATTERN.match(v) or len(v) > 255:
            raise ValueError("Please enter a valid email address")
        return v

    def check_reviewable(self, target: SubmissionStatus) -> None:
        """Raise unless the submission can move to target.

        Raises:
            InvalidTransitionError: If the submission is not pending
        """
        if self.status != SubmissionStatus.PENDING:
            raise InvalidTransitionError(
                str(self.id), self.status.value, target.value
            )

    def _review(
        self,
        target: SubmissionStatus,
        reviewer: AdminUserId,
        notes: Optional[str],
        **extra,
    ) -> "Submission":
        self.check_reviewable(target)
        return self.model_copy(
            update={
                "status": target,
                "reviewed_by": reviewer,
                "reviewed_at": datetime.now(),
                "admin_notes": notes if notes is not None else self.admin_notes,
                **extra,
            }
        )

    def approve(
        self, reviewer: AdminUserId, tyrant_id: TyrantId, notes: Optional[str] = None
    ) -> "Submission":
        """Return the approved copy linked to the tyrant created from it.

        Raises:
            InvalidTransitionError: If the submission is not pending
        """
        return self._review(
            SubmissionStatus.APPROVED, reviewer, notes, tyrant_id=tyrant_id
        )

    def reject(
        self, reviewer: AdminUserId, notes: Optional[str] = None
    ) -> "Submission":
        """Return the rejected copy.

        Raises:
            InvalidTransitionError: If the submission is not pending
        """
        return self._review(SubmissionStatus.REJECTED, reviewer, notes)
