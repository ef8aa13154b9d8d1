"""Unit tests for SubmissionService."""

from uuid import uuid4

import pytest

from tyrantcam.domain.error import InvalidTransitionError, NotFoundError
from tyrantcam.domain.repository import TyrantRepository
from tyrantcam.domain.service import SubmissionService
from tyrantcam.domain.value import (
    AdminUserId,
    EvidenceFile,
    SubmissionId,
    SubmissionStatus,
    TyrantCategory,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

DESCRIPTION = "Ordered police to clear a peaceful protest without cause."


async def _submit(service: SubmissionService, **overrides):
    fields = {
        "tyrant_name": "  Commissioner Example  ",
        "tyrant_title": "Police Commissioner",
        "category": TyrantCategory.LAW_ENFORCEMENT,
        "description": DESCRIPTION,
    }
    fields.update(overrides)
    return await service.submit(**fields)


class TestSubmit:
    """Tests for submit method."""

    @pytest.mark.asyncio
    async def test_submit_creates_pending_submission(self, unit_env):
        """Submissions are trimmed, pending and anonymous by default."""
        # Arrange
        service = await unit_env.get(SubmissionService)

        # Act
        submission = await _submit(service)

        # Assert
        assert submission.status == SubmissionStatus.PENDING
        assert submission.tyrant_name == "Commissioner Example"
        assert submission.reporter_contact is None
        assert submission.reviewed_at is None
        assert await service.pending_count() == 1

    @pytest.mark.asyncio
    async def test_submit_keeps_evidence_and_contact(self, unit_env):
        """Evidence descriptors and a valid contact email are stored."""
        # Arrange
        service = await unit_env.get(SubmissionService)
        evidence = EvidenceFile(
            name="order.pdf",
            url="https://files.example.org/order.pdf",
            type="application/pdf",
            size=1024,
        )

        # Act
        submission = await _submit(
            service, evidence_files=[evidence], reporter_contact="tips@example.org"
        )

        # Assert
        assert submission.evidence_files == [evidence]
        assert submission.reporter_contact == "tips@example.org"

    @pytest.mark.asyncio
    async def test_submit_rejects_short_description(self, unit_env):
        """Descriptions need at least twenty characters."""
        # Arrange
        service = await unit_env.get(SubmissionService)

        # Act & Assert
        with pytest.raises(ValueError):
            await _submit(service, description="Too short")

    @pytest.mark.asyncio
    async def test_submit_rejects_invalid_contact(self, unit_env):
        """A contact that is not an email is rejected."""
        # Arrange
        service = await unit_env.get(SubmissionService)

        # Act & Assert
        with pytest.raises(ValueError, match="valid email"):
            await _submit(service, reporter_contact="call me maybe")

    def test_evidence_rejects_unsupported_type(self):
        """Only images and PDFs are accepted."""
        with pytest.raises(ValueError, match="JPEG, PNG, WebP, or PDF"):
            EvidenceFile(name="clip.mp4", url="https://x.example/clip.mp4", type="video/mp4")


class TestReview:
    """Tests for approve and reject methods."""

    @pytest.mark.asyncio
    async def test_approve_creates_unpublished_draft(self, unit_env):
        """Approval links the submission to a new unpublished tyrant."""
        # Arrange
        service = await unit_env.get(SubmissionService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        reviewer = AdminUserId(uuid4())
        submission = await _submit(service)

        # Act
        approved, tyrant = await service.approve(submission.id, reviewer, "Verified")

        # Assert
        assert approved.status == SubmissionStatus.APPROVED
        assert approved.reviewed_by == reviewer
        assert approved.reviewed_at is not None
        assert approved.admin_notes == "Verified"
        assert approved.tyrant_id == tyrant.id

        stored = await tyrant_repo.find_by_id(tyrant.id)
        assert stored.is_published is False
        assert stored.shame_count == 0
        assert stored.name == "Commissioner Example"
        assert stored.position == "Police Commissioner"
        assert await service.pending_count() == 0

    @pytest.mark.asyncio
    async def test_reject_sets_status(self, unit_env):
        """Rejection records the reviewer and creates no tyrant."""
        # Arrange
        service = await unit_env.get(SubmissionService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        submission = await _submit(service)

        # Act
        rejected = await service.reject(submission.id, AdminUserId(uuid4()))

        # Assert
        assert rejected.status == SubmissionStatus.REJECTED
        assert rejected.tyrant_id is None
        assert await tyrant_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_reviewed_submission_cannot_be_reviewed_again(self, unit_env):
        """Only pending submissions can change status."""
        # Arrange
        service = await unit_env.get(SubmissionService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        submission = await _submit(service)
        await service.reject(submission.id, AdminUserId(uuid4()))

        # Act & Assert
        with pytest.raises(InvalidTransitionError):
            await service.approve(submission.id, AdminUserId(uuid4()))
        with pytest.raises(InvalidTransitionError):
            await service.reject(submission.id, AdminUserId(uuid4()))

        # No draft was created by the failed approval
        assert await tyrant_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_review_unknown_submission_raises(self, unit_env):
        """Reviewing a missing submission raises NotFoundError."""
        # Arrange
        service = await unit_env.get(SubmissionService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.approve(SubmissionId(uuid4()), AdminUserId(uuid4()))


class TestListSubmissions:
    """Tests for list_submissions method."""

    @pytest.mark.asyncio
    async def test_filters_by_status(self, unit_env):
        """Status filter narrows the queue."""
        # Arrange
        service = await unit_env.get(SubmissionService)
        pending = await _submit(service, tyrant_name="Pending One")
        rejected = await _submit(service, tyrant_name="Rejected One")
        await service.reject(rejected.id, AdminUserId(uuid4()))

        # Act
        pending_only = await service.list_submissions(status=SubmissionStatus.PENDING)
        everything = await service.list_submissions()

        # Assert
        assert [s.id for s in pending_only] == [pending.id]
        assert len(everything) == 2
