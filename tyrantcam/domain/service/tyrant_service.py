"""Tyrant domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from tyrantcam.domain.error import NotFoundError
from tyrantcam.domain.model.submission import Submission
from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.repository import TyrantRepository
from tyrantcam.domain.value import TyrantCategory, TyrantId

from .base import Service


class TyrantService(Service):
    """Domain service for tyrant entries."""

    def __init__(self, tyrant_repository: TyrantRepository) -> None:
        """Initialize tyrant service.

        Args:
            tyrant_repository: Tyrant repository
        """
        self.tyrant_repository = tyrant_repository

    async def list_published(
        self,
        category: Optional[TyrantCategory] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Tyrant]:
        """List published tyrants, most shamed first.

        Reads shame_count straight from the entry rows the vote ledger
        maintains; there is no separate cache.

        Args:
            category: Optional category filter
            limit: Page size
            offset: Number of entries to skip

        Returns:
            Published tyrants ordered by (shame_count DESC, created_at DESC)
        """
        with logfire.span(
            "tyrant_service.list_published",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            tyrants = await self.tyrant_repository.find_published(
                category=category, limit=limit, offset=offset
            )
            logfire.info("Published tyrants listed", count=len(tyrants))
            return tyrants

    async def count_published(self, category: Optional[TyrantCategory] = None) -> int:
        """Count published tyrants for pagination."""
        return await self.tyrant_repository.count_published(category=category)

    async def get_tyrant(self, tyrant_id: TyrantId) -> Tyrant | None:
        """Get a tyrant by ID regardless of publication state.

        Args:
            tyrant_id: Tyrant ID

        Returns:
            Tyrant if found, None otherwise
        """
        with logfire.span("tyrant_service.get_tyrant", tyrant_id=str(tyrant_id)):
            tyrant = await self.tyrant_repository.find_by_id(tyrant_id)
            if not tyrant:
                logfire.warn("Tyrant not found", tyrant_id=str(tyrant_id))
            return tyrant

    async def get_published(self, tyrant_id: TyrantId) -> Tyrant:
        """Get a tyrant visible to the public.

        Raises:
            NotFoundError: If the tyrant doesn't exist or is unpublished
        """
        tyrant = await self.get_tyrant(tyrant_id)
        if tyrant is None or not tyrant.is_published:
            raise NotFoundError("Tyrant", str(tyrant_id))
        return tyrant

    async def list_all(self, limit: int = 50, offset: int = 0) -> list[Tyrant]:
        """List all tyrants including drafts, newest first."""
        with logfire.span("tyrant_service.list_all", limit=limit, offset=offset):
            return await self.tyrant_repository.find_all(limit=limit, offset=offset)

    async def create_tyrant(
        self,
        name: str,
        title: str,
        position: str,
        category: TyrantCategory,
        description: str,
        image_url: Optional[str] = None,
        evidence_urls: Optional[list[str]] = None,
        is_published: bool = False,
    ) -> Tyrant:
        """Create a tyrant entry with a zero shame count.

        Returns:
            The saved tyrant
        """
        now = datetime.now()
        tyrant = Tyrant(
            id=TyrantId(uuid4()),
            name=name,
            title=title,
            position=position,
            category=category,
            description=description,
            image_url=image_url,
            evidence_urls=evidence_urls or [],
            shame_count=0,
            is_published=is_published,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "tyrant_service.create_tyrant", tyrant_id=str(tyrant.id), name=name
        ):
            saved = await self.tyrant_repository.save(tyrant)
            logfire.info(
                "Tyrant created",
                tyrant_id=str(saved.id),
                category=category.value,
                is_published=is_published,
            )
            return saved

    async def create_from_submission(self, submission: Submission) -> Tyrant:
        """Create an unpublished draft entry from a submission.

        The submission only carries one title field, so it fills both the
        title and the position of the entry.
        """
        return await self.create_tyrant(
            name=submission.tyrant_name,
            title=submission.tyrant_title,
            position=submission.tyrant_title,
            category=submission.category,
            description=submission.description,
            evidence_urls=[f.url for f in submission.evidence_files],
            is_published=False,
        )

    async def set_published(self, tyrant_id: TyrantId, is_published: bool) -> Tyrant:
        """Publish or unpublish a tyrant.

        Raises:
            NotFoundError: If the tyrant doesn't exist
        """
        with logfire.span(
            "tyrant_service.set_published",
            tyrant_id=str(tyrant_id),
            is_published=is_published,
        ):
            updated = await self.tyrant_repository.set_published(tyrant_id, is_published)
            if updated is None:
                raise NotFoundError("Tyrant", str(tyrant_id))
            logfire.info(
                "Tyrant publication changed",
                tyrant_id=str(tyrant_id),
                is_published=is_published,
            )
            return updated

    async def delete_tyrant(self, tyrant_id: TyrantId) -> None:
        """Delete a tyrant together with its votes.

        Raises:
            NotFoundError: If the tyrant doesn't exist
        """
        with logfire.span("tyrant_service.delete_tyrant", tyrant_id=str(tyrant_id)):
            deleted = await self.tyrant_repository.delete(tyrant_id)
            if not deleted:
                raise NotFoundError("Tyrant", str(tyrant_id))
            logfire.info("Tyrant deleted", tyrant_id=str(tyrant_id))
