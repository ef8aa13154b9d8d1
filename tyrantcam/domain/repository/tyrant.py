"""Tyrant repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.value import TyrantCategory, TyrantId


class TyrantRepository(ABC):
    """Repository for the Tyrant entity.

    shame_count is owned by the vote ledger: save() must not be used to
    change it, and VoteRepository adjusts it together with vote rows.
    """

    @abstractmethod
    async def find_by_id(self, tyrant_id: TyrantId) -> Optional[Tyrant]:
        """Find a tyrant by ID, published or not.

        Args:
            tyrant_id: The tyrant's unique identifier

        Returns:
            The tyrant if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_published(
        self,
        category: Optional[TyrantCategory] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Tyrant]:
        """Find published tyrants, most shamed first.

        Ordered by shame_count DESC, then created_at DESC.

        Args:
            category: Filter by category (None for all categories)
            limit: Maximum number of tyrants to return
            offset: Number of tyrants to skip

        Returns:
            Published tyrants matching the criteria
        """
        pass

    @abstractmethod
    async def count_published(self, category: Optional[TyrantCategory] = None) -> int:
        """Count published tyrants.

        Args:
            category: Filter by category (None for all categories)

        Returns:
            Number of published tyrants
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 50, offset: int = 0) -> List[Tyrant]:
        """Find all tyrants including drafts, newest first.

        Args:
            limit: Maximum number of tyrants to return
            offset: Number of tyrants to skip

        Returns:
            Tyrants ordered by created_at DESC
        """
        pass

    @abstractmethod
    async def save(self, tyrant: Tyrant) -> Tyrant:
        """Create a tyrant.

        Args:
            tyrant: The tyrant to save

        Returns:
            The saved tyrant
        """
        pass

    @abstractmethod
    async def set_published(
        self, tyrant_id: TyrantId, is_published: bool
    ) -> Optional[Tyrant]:
        """Publish or unpublish a tyrant.

        Args:
            tyrant_id: The tyrant ID
            is_published: New publication flag

        Returns:
            Updated tyrant, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, tyrant_id: TyrantId) -> bool:
        """Delete a tyrant and, by cascade, its votes.

        Args:
            tyrant_id: The tyrant ID

        Returns:
            True if a tyrant was deleted
        """
        pass
