"""Submission domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from tyrantcam.domain.error import NotFoundError
from tyrantcam.domain.model.submission import Submission
from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.repository import SubmissionRepository
from tyrantcam.domain.value import (
    AdminUserId,
    EvidenceFile,
    SubmissionId,
    SubmissionStatus,
    TyrantCategory,
)

from .base import Service
from .tyrant_service import TyrantService


class SubmissionService(Service):
    """Domain service for the moderation queue."""

    def __init__(
        self,
        submission_repository: SubmissionRepository,
        tyrant_service: TyrantService,
    ) -> None:
        """Initialize submission service.

        Args:
            submission_repository: Submission repository
            tyrant_service: Tyrant domain service (entries created on approval)
        """
        self.submission_repository = submission_repository
        self.tyrant_service = tyrant_service

    async def submit(
        self,
        tyrant_name: str,
        tyrant_title: str,
        category: TyrantCategory,
        description: str,
        evidence_files: Optional[list[EvidenceFile]] = None,
        reporter_contact: Optional[str] = None,
    ) -> Submission:
        """Queue a public report for moderation.

        Returns:
            The pending submission
        """
        submission = Submission(
            id=SubmissionId(uuid4()),
            tyrant_name=tyrant_name.strip(),
            tyrant_title=tyrant_title.strip(),
            category=category,
            description=description.strip(),
            evidence_files=evidence_files or [],
            reporter_contact=reporter_contact,
            status=SubmissionStatus.PENDING,
            submitted_at=datetime.now(),
        )

        with logfire.span("submission_service.submit", submission_id=str(submission.id)):
            saved = await self.submission_repository.save(submission)
            logfire.info(
                "Submission received",
                submission_id=str(saved.id),
                category=category.value,
                evidence_count=len(saved.evidence_files),
                anonymous=saved.reporter_contact is None,
            )
            return saved

    async def get_submission(self, submission_id: SubmissionId) -> Submission:
        """Get a submission.

        Raises:
            NotFoundError: If the submission doesn't exist
        """
        submission = await self.submission_repository.find_by_id(submission_id)
        if submission is None:
            logfire.warn("Submission not found", submission_id=str(submission_id))
            raise NotFoundError("Submission", str(submission_id))
        return submission

    async def list_submissions(
        self,
        status: Optional[SubmissionStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Submission]:
        """List submissions, newest first."""
        with logfire.span(
            "submission_service.list_submissions",
            status=status.value if status else None,
        ):
            return await self.submission_repository.find_all(
                status=status, limit=limit, offset=offset
            )

    async def pending_count(self) -> int:
        """Number of submissions waiting for review."""
        return await self.submission_repository.count_by_status(
            SubmissionStatus.PENDING
        )

    async def approve(
        self,
        submission_id: SubmissionId,
        reviewer: AdminUserId,
        notes: Optional[str] = None,
    ) -> tuple[Submission, Tyrant]:
        """Approve a pending submission and create its draft entry.

        The entry is created unpublished; publishing stays a separate step.

        Raises:
            NotFoundError: If the submission doesn't exist
            InvalidTransitionError: If the submission is not pending
        """
        with logfire.span(
            "submission_service.approve",
            submission_id=str(submission_id),
            reviewer=str(reviewer),
        ):
            submission = await self.get_submission(submission_id)
            # Fail on non-pending before creating the entry
            submission.check_reviewable(SubmissionStatus.APPROVED)

            tyrant = await self.tyrant_service.create_from_submission(submission)
            approved = submission.approve(reviewer, tyrant.id, notes)
            saved = await self.submission_repository.save(approved)

            logfire.info(
                "Submission approved",
                submission_id=str(submission_id),
                tyrant_id=str(tyrant.id),
            )
            return saved, tyrant

    async def reject(
        self,
        submission_id: SubmissionId,
        reviewer: AdminUserId,
        notes: Optional[str] = None,
    ) -> Submission:
        """Reject a pending submission.

        Raises:
            NotFoundError: If the submission doesn't exist
            InvalidTransitionError: If the submission is not pending
        """
        with logfire.span(
            "submission_service.reject",
            submission_id=str(submission_id),
            reviewer=str(reviewer),
        ):
            submission = await self.get_submission(submission_id)
            rejected = submission.reject(reviewer, notes)
            saved = await self.submission_repository.save(rejected)
            logfire.info("Submission rejected", submission_id=str(submission_id))
            return saved
