"""PostgreSQL implementation of Tyrant repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tyrantcam.domain.model import Tyrant
from tyrantcam.domain.repository import TyrantRepository
from tyrantcam.domain.value import TyrantCategory, TyrantId
from tyrantcam.persistence.mappers import row_to_tyrant, tyrant_to_dict
from tyrantcam.persistence.tables import tyrants_table


class PostgresTyrantRepository(TyrantRepository):
    """PostgreSQL implementation of TyrantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, tyrant_id: TyrantId) -> Optional[Tyrant]:
        """Find a tyrant by ID."""
        stmt = select(tyrants_table).where(tyrants_table.c.id == tyrant_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tyrant(dict(row)) if row else None

    async def find_published(
        self,
        category: Optional[TyrantCategory] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Tyrant]:
        """Find published tyrants, most shamed first."""
        with logfire.span(
            "tyrant_repository.find_published",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(tyrants_table).where(tyrants_table.c.is_published.is_(True))
            if category is not None:
                stmt = stmt.where(tyrants_table.c.category == category.value)

            stmt = (
                stmt.order_by(
                    desc(tyrants_table.c.shame_count),
                    desc(tyrants_table.c.created_at),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_tyrant(dict(row)) for row in result.mappings().all()]

    async def count_published(self, category: Optional[TyrantCategory] = None) -> int:
        """Count published tyrants."""
        stmt = (
            select(func.count())
            .select_from(tyrants_table)
            .where(tyrants_table.c.is_published.is_(True))
        )
        if category is not None:
            stmt = stmt.where(tyrants_table.c.category == category.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_all(self, limit: int = 50, offset: int = 0) -> List[Tyrant]:
        """Find all tyrants including drafts, newest first."""
        stmt = (
            select(tyrants_table)
            .order_by(desc(tyrants_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_tyrant(dict(row)) for row in result.mappings().all()]

    async def save(self, tyrant: Tyrant) -> Tyrant:
        """Create a tyrant.

        The row always starts at shame_count 0; only vote writes move it.
        """
        tyrant_dict = tyrant_to_dict(tyrant)
        tyrant_dict["shame_count"] = 0
        tyrant_dict["category"] = tyrant.category.value

        stmt = insert(tyrants_table).values(**tyrant_dict).returning(tyrants_table)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_tyrant(dict(result.mappings().one()))

    async def set_published(
        self, tyrant_id: TyrantId, is_published: bool
    ) -> Optional[Tyrant]:
        """Publish or unpublish a tyrant."""
        stmt = (
            update(tyrants_table)
            .where(tyrants_table.c.id == tyrant_id)
            .values(is_published=is_published, updated_at=func.now())
            .returning(tyrants_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_tyrant(dict(row)) if row else None

    async def delete(self, tyrant_id: TyrantId) -> bool:
        """Delete a tyrant; its votes go with it via ON DELETE CASCADE."""
        stmt = delete(tyrants_table).where(tyrants_table.c.id == tyrant_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
