"""Submission repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tyrantcam.domain.model.submission import Submission
from tyrantcam.domain.value import SubmissionId, SubmissionStatus


class SubmissionRepository(ABC):
    """Repository for the moderation queue."""

    @abstractmethod
    async def find_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Find a submission by ID."""
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[SubmissionStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Submission]:
        """Find submissions, newest first.

        Args:
            status: Filter by status (None for all)
            limit: Maximum number of submissions to return
            offset: Number of submissions to skip

        Returns:
            Submissions ordered by submitted_at DESC
        """
        pass

    @abstractmethod
    async def count_by_status(self, status: SubmissionStatus) -> int:
        """Count submissions with the given status."""
        pass

    @abstractmethod
    async def save(self, submission: Submission) -> Submission:
        """Save a submission (create or update)."""
        pass
