"""PostgreSQL implementation of Submission repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tyrantcam.domain.model import Submission
from tyrantcam.domain.repository import SubmissionRepository
from tyrantcam.domain.value import SubmissionId, SubmissionStatus
from tyrantcam.persistence.mappers import row_to_submission, submission_to_dict
from tyrantcam.persistence.tables import submissions_table


class PostgresSubmissionRepository(SubmissionRepository):
    """PostgreSQL implementation of SubmissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Find a submission by ID."""
        stmt = select(submissions_table).where(submissions_table.c.id == submission_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_submission(dict(row)) if row else None

    async def find_all(
        self,
        status: Optional[SubmissionStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Submission]:
        """Find submissions, newest first."""
        with logfire.span(
            "submission_repository.find_all",
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(submissions_table)
            if status is not None:
                stmt = stmt.where(submissions_table.c.status == status.value)
            stmt = (
                stmt.order_by(desc(submissions_table.c.submitted_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_submission(dict(row)) for row in result.mappings().all()]

    async def count_by_status(self, status: SubmissionStatus) -> int:
        """Count submissions with the given status."""
        stmt = (
            select(func.count())
            .select_from(submissions_table)
            .where(submissions_table.c.status == status.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, submission: Submission) -> Submission:
        """Save a submission (create or update)."""
        existing = await self.find_by_id(submission.id)
        submission_dict = submission_to_dict(submission)

        if existing:
            stmt = (
                update(submissions_table)
                .where(submissions_table.c.id == submission.id)
                .values(**submission_dict)
            )
        else:
            stmt = insert(submissions_table).values(**submission_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return submission
