"""Vote entity and vote operation results.

Each visitor fingerprint can shame a given tyrant once. Outcomes of vote
operations are returned as tagged results rather than raised, so callers
can present a duplicate vote as a normal "already shamed" state.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tyrantcam.domain.model.common import DomainModel
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (tyrant, fingerprint), enforced by a unique constraint
    - Deleted together with its tyrant
    """

    id: VoteId
    tyrant_id: TyrantId
    fingerprint: Fingerprint
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class VoteOutcome(str, Enum):
    """Tag of a vote operation result."""

    CAST = "cast"
    REVOKED = "revoked"
    DUPLICATE_VOTE = "duplicate_vote"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    NOT_AUTHORIZED = "not_authorized"
    STORAGE_ERROR = "storage_error"


class CastVoteResult(BaseModel):
    """Result of casting a vote.

    vote and shame_count are set only when outcome is CAST.
    """

    model_config = ConfigDict(frozen=True)

    outcome: VoteOutcome
    vote: Optional[Vote] = None
    shame_count: Optional[int] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == VoteOutcome.CAST


class RevokeVoteResult(BaseModel):
    """Result of revoking a vote."""

    model_config = ConfigDict(frozen=True)

    outcome: VoteOutcome
    tyrant_id: Optional[TyrantId] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == VoteOutcome.REVOKED
