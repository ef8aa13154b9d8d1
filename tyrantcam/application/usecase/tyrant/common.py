"""Response models shared by tyrant use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.value import TyrantCategory


class TyrantResponse(BaseModel):
    """Tyrant as returned by the API."""

    id: str
    name: str
    title: str
    position: str
    category: TyrantCategory
    description: str
    image_url: Optional[str]
    evidence_urls: list[str]
    shame_count: int
    is_published: bool
    created_at: datetime
    updated_at: datetime
    has_voted: bool = False  # Caller's fingerprint has a vote on this tyrant

    @classmethod
    def from_tyrant(cls, tyrant: Tyrant, has_voted: bool = False) -> "TyrantResponse":
        """Build the response from a domain model."""
        return cls(
            id=str(tyrant.id),
            name=tyrant.name,
            title=tyrant.title,
            position=tyrant.position,
            category=tyrant.category,
            description=tyrant.description,
            image_url=tyrant.image_url,
            evidence_urls=list(tyrant.evidence_urls),
            shame_count=tyrant.shame_count,
            is_published=tyrant.is_published,
            created_at=tyrant.created_at,
            updated_at=tyrant.updated_at,
            has_voted=has_voted,
        )


class TyrantListResponse(BaseModel):
    """Page of tyrants."""

    tyrants: list[TyrantResponse]
    total: int
    limit: int
    offset: int
