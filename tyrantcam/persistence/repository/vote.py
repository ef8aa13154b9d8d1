"""PostgreSQL implementation of Vote repository."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tyrantcam.domain.model import Vote
from tyrantcam.domain.repository import VoteRepository
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId
from tyrantcam.persistence.mappers import row_to_vote, vote_to_dict
from tyrantcam.persistence.tables import tyrants_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Ledger writes run inside a SAVEPOINT so that a unique-constraint
    violation rolls back only the vote attempt, leaving the request's
    session usable for the follow-up lookup.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_tyrant_and_fingerprint(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint
    ) -> Optional[Vote]:
        """Find the vote a visitor cast on a tyrant."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.tyrant_id == tyrant_id,
                votes_table.c.fingerprint == fingerprint.root,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def exists_since(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint, window_hours: int
    ) -> bool:
        """Check for a vote cast within the last window_hours."""
        # Same clock that stamps Vote.created_at
        cutoff = datetime.now(timezone.utc) - timedelta(hours=window_hours)
        stmt = (
            select(votes_table.c.id)
            .where(
                and_(
                    votes_table.c.tyrant_id == tyrant_id,
                    votes_table.c.fingerprint == fingerprint.root,
                    votes_table.c.created_at > cutoff,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_fingerprint_and_tyrants(
        self, fingerprint: Fingerprint, tyrant_ids: Sequence[TyrantId]
    ) -> List[Vote]:
        """Find a visitor's votes on several tyrants (batch query)."""
        if not tyrant_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.fingerprint == fingerprint.root,
                votes_table.c.tyrant_id.in_(tyrant_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_tyrant(self, tyrant_id: TyrantId) -> int:
        """Count live votes on a tyrant."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.tyrant_id == tyrant_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, vote: Vote) -> int:
        """Insert the vote and bump shame_count in one savepoint.

        Raises:
            IntegrityError: On a duplicate (tyrant, fingerprint) pair or a
                missing tyrant
        """
        vote_dict = vote_to_dict(vote)
        vote_dict["fingerprint"] = vote.fingerprint.root

        with logfire.span("vote_repository.save", tyrant_id=str(vote.tyrant_id)):
            async with self.session.begin_nested():
                await self.session.execute(insert(votes_table).values(**vote_dict))
                result = await self.session.execute(
                    update(tyrants_table)
                    .where(tyrants_table.c.id == vote.tyrant_id)
                    .values(
                        shame_count=tyrants_table.c.shame_count + 1,
                        updated_at=func.now(),
                    )
                    .returning(tyrants_table.c.shame_count)
                )
                shame_count = result.scalar_one()
            return shame_count

    async def delete(self, vote_id: VoteId) -> Optional[Vote]:
        """Delete a vote and decrement shame_count in one savepoint."""
        with logfire.span("vote_repository.delete", vote_id=str(vote_id)):
            async with self.session.begin_nested():
                result = await self.session.execute(
                    delete(votes_table)
                    .where(votes_table.c.id == vote_id)
                    .returning(votes_table)
                )
                row = result.fetchone()
                if row is None:
                    return None

                vote = row_to_vote(row._asdict())
                await self.session.execute(
                    update(tyrants_table)
                    .where(tyrants_table.c.id == vote.tyrant_id)
                    .values(
                        shame_count=func.greatest(tyrants_table.c.shame_count - 1, 0),
                        updated_at=func.now(),
                    )
                )
            return vote
