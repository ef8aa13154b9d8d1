"""In-memory vote repository for testing."""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from tyrantcam.domain.model.vote import Vote
from tyrantcam.domain.repository.vote import VoteRepository
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Raises the same IntegrityError as PostgreSQL for duplicate pairs and
    missing tyrants.
    """

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._store.votes.get(vote_id)

    def _find_pair(self, tyrant_id: TyrantId, fingerprint: Fingerprint) -> Optional[Vote]:
        for vote in self._store.votes.values():
            if vote.tyrant_id == tyrant_id and vote.fingerprint == fingerprint:
                return vote
        return None

    async def find_by_tyrant_and_fingerprint(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint
    ) -> Optional[Vote]:
        """Find the vote a visitor cast on a tyrant."""
        return self._find_pair(tyrant_id, fingerprint)

    async def exists_since(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint, window_hours: int
    ) -> bool:
        """Check for a vote cast within the last window_hours."""
        vote = self._find_pair(tyrant_id, fingerprint)
        if vote is None:
            return False
        return vote.created_at > datetime.now(timezone.utc) - timedelta(hours=window_hours)

    async def find_by_fingerprint_and_tyrants(
        self, fingerprint: Fingerprint, tyrant_ids: Sequence[TyrantId]
    ) -> list[Vote]:
        """Find a visitor's votes on several tyrants (batch query)."""
        wanted = set(tyrant_ids)
        return [
            v
            for v in self._store.votes.values()
            if v.fingerprint == fingerprint and v.tyrant_id in wanted
        ]

    async def count_by_tyrant(self, tyrant_id: TyrantId) -> int:
        """Count live votes on a tyrant."""
        return sum(1 for v in self._store.votes.values() if v.tyrant_id == tyrant_id)

    async def save(self, vote: Vote) -> int:
        """Record a vote and increment the tyrant's shame_count.

        Raises:
            IntegrityError: If the pair already voted or the tyrant is missing
        """
        async with self._store.lock:
            tyrant = self._store.tyrants.get(vote.tyrant_id)
            if tyrant is None:
                raise IntegrityError("Tyrant does not exist", None, Exception())
            if self._find_pair(vote.tyrant_id, vote.fingerprint):
                raise IntegrityError("Duplicate vote", None, Exception())

            self._store.votes[vote.id] = vote
            updated = tyrant.model_copy(
                update={
                    "shame_count": tyrant.shame_count + 1,
                    "updated_at": datetime.now(),
                }
            )
            self._store.tyrants[tyrant.id] = updated
            return updated.shame_count

    async def delete(self, vote_id: VoteId) -> Optional[Vote]:
        """Delete a vote and decrement its tyrant's shame_count (floor 0)."""
        async with self._store.lock:
            vote = self._store.votes.pop(vote_id, None)
            if vote is None:
                return None

            tyrant = self._store.tyrants.get(vote.tyrant_id)
            if tyrant is not None:
                self._store.tyrants[tyrant.id] = tyrant.model_copy(
                    update={
                        "shame_count": max(tyrant.shame_count - 1, 0),
                        "updated_at": datetime.now(),
                    }
                )
            return vote
