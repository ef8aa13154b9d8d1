"""In-memory submission repository for testing."""

from typing import Optional

from tyrantcam.domain.model.submission import Submission
from tyrantcam.domain.repository.submission import SubmissionRepository
from tyrantcam.domain.value import SubmissionId, SubmissionStatus

from .store import InMemoryStore


class InMemorySubmissionRepository(SubmissionRepository):
    """In-memory implementation of SubmissionRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Find a submission by ID."""
        return self._store.submissions.get(submission_id)

    async def find_all(
        self,
        status: Optional[SubmissionStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Submission]:
        """Find submissions, newest first."""
        submissions = list(self._store.submissions.values())
        if status is not None:
            submissions = [s for s in submissions if s.status == status]
        submissions.sort(key=lambda s: s.submitted_at, reverse=True)
        return submissions[offset : offset + limit]

    async def count_by_status(self, status: SubmissionStatus) -> int:
        """Count submissions with the given status."""
        return sum(1 for s in self._store.submissions.values() if s.status == status)

    async def save(self, submission: Submission) -> Submission:
        """Save a submission (create or update)."""
        self._store.submissions[submission.id] = submission
        return submission
