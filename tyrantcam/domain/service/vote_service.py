"""Vote domain service.

Casting and revoking votes return tagged results (CastVoteResult,
RevokeVoteResult). Duplicate votes, unknown entries, malformed fingerprints
and storage faults are expected outcomes the caller renders, not exceptions.
"""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tyrantcam.domain.model.vote import (
    CastVoteResult,
    RevokeVoteResult,
    Vote,
    VoteOutcome,
)
from tyrantcam.domain.repository import TyrantRepository, VoteRepository
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId

from .base import Service

DEFAULT_WINDOW_HOURS = 24
INVALID_FINGERPRINT = "Fingerprint must be exactly 64 hexadecimal characters"


class VoteService(Service):
    """Domain service for the vote ledger and shame counter."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        tyrant_repository: TyrantRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            tyrant_repository: Tyrant repository
        """
        self.vote_repository = vote_repository
        self.tyrant_repository = tyrant_repository

    @staticmethod
    def parse_fingerprint(fingerprint: str) -> Fingerprint | None:
        """Parse a raw fingerprint, returning None when malformed."""
        try:
            return Fingerprint(fingerprint)
        except PydanticValidationError:
            return None

    async def cast_vote(self, tyrant_id: TyrantId, fingerprint: str) -> CastVoteResult:
        """Shame a tyrant once per visitor fingerprint.

        On success the vote row exists and the tyrant's shame_count has been
        incremented by exactly one in the same atomic unit.

        Args:
            tyrant_id: Tyrant ID
            fingerprint: Visitor fingerprint (64 hex characters)

        Returns:
            Result tagged CAST, DUPLICATE_VOTE, NOT_FOUND, VALIDATION_ERROR
            or STORAGE_ERROR
        """
        with logfire.span("vote_service.cast_vote", tyrant_id=str(tyrant_id)):
            parsed = self.parse_fingerprint(fingerprint)
            if parsed is None:
                logfire.warn("Malformed fingerprint", tyrant_id=str(tyrant_id))
                return CastVoteResult(
                    outcome=VoteOutcome.VALIDATION_ERROR, detail=INVALID_FINGERPRINT
                )

            try:
                return await self._record_vote(tyrant_id, parsed)
            except SQLAlchemyError as e:
                logfire.error(
                    "Storage failure while casting vote",
                    tyrant_id=str(tyrant_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return CastVoteResult(
                    outcome=VoteOutcome.STORAGE_ERROR, detail="Vote could not be stored"
                )

    async def _record_vote(
        self, tyrant_id: TyrantId, fingerprint: Fingerprint
    ) -> CastVoteResult:
        tyrant = await self.tyrant_repository.find_by_id(tyrant_id)
        if tyrant is None:
            logfire.warn("Vote on unknown tyrant", tyrant_id=str(tyrant_id))
            return CastVoteResult(
                outcome=VoteOutcome.NOT_FOUND, detail="Tyrant not found"
            )

        vote = Vote(
            id=VoteId(uuid4()),
            tyrant_id=tyrant_id,
            fingerprint=fingerprint,
            created_at=datetime.now(timezone.utc),
        )

        try:
            shame_count = await self.vote_repository.save(vote)
        except IntegrityError:
            # Either the pair already voted or the tyrant vanished meanwhile
            existing = await self.vote_repository.find_by_tyrant_and_fingerprint(
                tyrant_id, fingerprint
            )
            if existing is None:
                logfire.warn("Tyrant deleted during vote", tyrant_id=str(tyrant_id))
                return CastVoteResult(
                    outcome=VoteOutcome.NOT_FOUND, detail="Tyrant not found"
                )
            logfire.info(
                "Duplicate vote attempt",
                tyrant_id=str(tyrant_id),
                fingerprint=fingerprint.short,
            )
            return CastVoteResult(
                outcome=VoteOutcome.DUPLICATE_VOTE,
                detail="Already shamed this tyrant",
            )

        logfire.info(
            "Vote cast",
            tyrant_id=str(tyrant_id),
            fingerprint=fingerprint.short,
            shame_count=shame_count,
        )
        return CastVoteResult(
            outcome=VoteOutcome.CAST, vote=vote, shame_count=shame_count
        )

    async def revoke_vote(self, vote_id: VoteId, is_admin: bool) -> RevokeVoteResult:
        """Delete a vote and decrement its tyrant's shame_count (floor 0).

        Args:
            vote_id: Vote ID
            is_admin: Whether the caller is an administrator

        Returns:
            Result tagged REVOKED, NOT_AUTHORIZED, NOT_FOUND or STORAGE_ERROR
        """
        with logfire.span("vote_service.revoke_vote", vote_id=str(vote_id)):
            if not is_admin:
                logfire.warn("Vote revocation without admin", vote_id=str(vote_id))
                return RevokeVoteResult(
                    outcome=VoteOutcome.NOT_AUTHORIZED,
                    detail="Administrator privileges required",
                )

            try:
                deleted = await self.vote_repository.delete(vote_id)
            except SQLAlchemyError as e:
                logfire.error(
                    "Storage failure while revoking vote",
                    vote_id=str(vote_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return RevokeVoteResult(
                    outcome=VoteOutcome.STORAGE_ERROR,
                    detail="Vote could not be revoked",
                )

            if deleted is None:
                logfire.info("No vote to revoke", vote_id=str(vote_id))
                return RevokeVoteResult(
                    outcome=VoteOutcome.NOT_FOUND, detail="Vote not found"
                )

            logfire.info(
                "Vote revoked", vote_id=str(vote_id), tyrant_id=str(deleted.tyrant_id)
            )
            return RevokeVoteResult(
                outcome=VoteOutcome.REVOKED, tyrant_id=deleted.tyrant_id
            )

    async def has_voted(
        self,
        tyrant_id: TyrantId,
        fingerprint: str,
        window_hours: int = DEFAULT_WINDOW_HOURS,
    ) -> bool:
        """Check whether a visitor voted on a tyrant within the last window_hours.

        This is a display hint only; the uniqueness constraint is what
        actually blocks repeat votes, and it never expires.

        Args:
            tyrant_id: Tyrant ID
            fingerprint: Visitor fingerprint
            window_hours: Look-back window in hours

        Returns:
            True if a vote inside the window exists; False for malformed
            fingerprints or non-positive windows
        """
        parsed = self.parse_fingerprint(fingerprint)
        if parsed is None or window_hours <= 0:
            return False

        with logfire.span(
            "vote_service.has_voted",
            tyrant_id=str(tyrant_id),
            window_hours=window_hours,
        ):
            return await self.vote_repository.exists_since(
                tyrant_id, parsed, window_hours
            )

    async def voted_tyrant_ids(
        self, fingerprint: str, tyrant_ids: Sequence[TyrantId]
    ) -> set[TyrantId]:
        """Return which of the given tyrants a visitor has ever shamed.

        Args:
            fingerprint: Visitor fingerprint
            tyrant_ids: Tyrant IDs to check

        Returns:
            Subset of tyrant_ids with a live vote from the visitor
        """
        parsed = self.parse_fingerprint(fingerprint)
        if parsed is None or not tyrant_ids:
            return set()

        # Batch query to avoid one lookup per listed tyrant
        votes = await self.vote_repository.find_by_fingerprint_and_tyrants(
            parsed, tyrant_ids
        )
        return {vote.tyrant_id for vote in votes}
