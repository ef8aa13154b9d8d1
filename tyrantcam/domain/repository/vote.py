"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from tyrantcam.domain.model.vote import Vote
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    save() and delete() are the only writers of Tyrant.shame_count. Each
    writes the ledger row and adjusts the counter as one atomic unit.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_tyrant_and_fingerprint(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint
    ) -> Optional[Vote]:
        """Find the vote a visitor cast on a tyrant.

        Args:
            tyrant_id: The tyrant's ID
            fingerprint: The visitor's fingerprint

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_since(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint, window_hours: int
    ) -> bool:
        """Check for a vote cast within the last window_hours.

        Args:
            tyrant_id: The tyrant's ID
            fingerprint: The visitor's fingerprint
            window_hours: Size of the look-back window

        Returns:
            True if a vote for the pair was created inside the window
        """
        pass

    @abstractmethod
    async def find_by_fingerprint_and_tyrants(
        self, fingerprint: Fingerprint, tyrant_ids: Sequence[TyrantId]
    ) -> List[Vote]:
        """Find a visitor's votes on several tyrants (batch query).

        Args:
            fingerprint: The visitor's fingerprint
            tyrant_ids: Tyrant IDs to check

        Returns:
            Votes by the visitor on the given tyrants
        """
        pass

    @abstractmethod
    async def count_by_tyrant(self, tyrant_id: TyrantId) -> int:
        """Count live votes on a tyrant.

        Args:
            tyrant_id: The tyrant's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> int:
        """Record a vote and increment the tyrant's shame_count.

        Both writes succeed or neither does.

        Args:
            vote: The vote to record

        Returns:
            The tyrant's shame_count after the increment

        Raises:
            IntegrityError: If the (tyrant, fingerprint) pair already voted,
                or the tyrant does not exist
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> Optional[Vote]:
        """Delete a vote and decrement its tyrant's shame_count (floor 0).

        Both writes succeed or neither does.

        Args:
            vote_id: The vote ID to delete

        Returns:
            The deleted vote, or None if no vote existed
        """
        pass
