"""Tyrant entity.

A tyrant is an entry describing a shamed official. Entries start unpublished
and become visible once an administrator publishes them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tyrantcam.domain.model.common import DomainModel
from tyrantcam.domain.value import TyrantCategory, TyrantId


class Tyrant(DomainModel):
    """Tyrant entity.

    Business rules:
    - shame_count equals the number of live votes for this entry and is never
      negative; only the vote ledger adjusts it
    - updated_at is refreshed on every mutation
    """

    id: TyrantId
    name: str = Field(min_length=2, max_length=100)
    title: str = Field(min_length=1, max_length=150)
    position: str = Field(min_length=1, max_length=150)
    category: TyrantCategory
    description: str = Field(min_length=10, max_length=5000)
    image_url: Optional[str] = None
    evidence_urls: list[str] = Field(default_factory=list)
    shame_count: int = Field(default=0, ge=0)
    is_published: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
