"""In-memory tyrant repository for testing."""

from datetime import datetime
from typing import Optional

from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.repository.tyrant import TyrantRepository
from tyrantcam.domain.value import TyrantCategory, TyrantId

from .store import InMemoryStore


class InMemoryTyrantRepository(TyrantRepository):
    """In-memory implementation of TyrantRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, tyrant_id: TyrantId) -> Optional[Tyrant]:
        """Find a tyrant by ID."""
        return self._store.tyrants.get(tyrant_id)

    def _published(self, category: Optional[TyrantCategory]) -> list[Tyrant]:
        tyrants = [t for t in self._store.tyrants.values() if t.is_published]
        if category is not None:
            tyrants = [t for t in tyrants if t.category == category]
        return tyrants

    async def find_published(
        self,
        category: Optional[TyrantCategory] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Tyrant]:
        """Find published tyrants, most shamed first."""
        tyrants = self._published(category)
        tyrants.sort(key=lambda t: (t.shame_count, t.created_at), reverse=True)
        return tyrants[offset : offset + limit]

    async def count_published(self, category: Optional[TyrantCategory] = None) -> int:
        """Count published tyrants."""
        return len(self._published(category))

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Tyrant]:
        """Find all tyrants including drafts, newest first."""
        tyrants = sorted(
            self._store.tyrants.values(), key=lambda t: t.created_at, reverse=True
        )
        return tyrants[offset : offset + limit]

    async def save(self, tyrant: Tyrant) -> Tyrant:
        """Create a tyrant with a zero shame count."""
        async with self._store.lock:
            saved = tyrant.model_copy(update={"shame_count": 0})
            self._store.tyrants[tyrant.id] = saved
            return saved

    async def set_published(
        self, tyrant_id: TyrantId, is_published: bool
    ) -> Optional[Tyrant]:
        """Publish or unpublish a tyrant."""
        async with self._store.lock:
            tyrant = self._store.tyrants.get(tyrant_id)
            if tyrant is None:
                return None
            updated = tyrant.model_copy(
                update={"is_published": is_published, "updated_at": datetime.now()}
            )
            self._store.tyrants[tyrant_id] = updated
            return updated

    async def delete(self, tyrant_id: TyrantId) -> bool:
        """Delete a tyrant and its votes."""
        async with self._store.lock:
            if self._store.tyrants.pop(tyrant_id, None) is None:
                return False
            self._store.votes = {
                vote_id: vote
                for vote_id, vote in self._store.votes.items()
                if vote.tyrant_id != tyrant_id
            }
            # Mirrors ON DELETE SET NULL on submissions.tyrant_id
            for submission_id, submission in list(self._store.submissions.items()):
                if submission.tyrant_id == tyrant_id:
                    self._store.submissions[submission_id] = submission.model_copy(
                        update={"tyrant_id": None}
                    )
            return True
