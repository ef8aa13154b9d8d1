"""Integration tests for PostgresVoteRepository.

These tests verify that the ledger write and the shame_count adjustment run
against a real database as one unit. They need a migrated PostgreSQL reachable
through DATABASE__URL and only run when TYRANTCAM_INTEGRATION=1.
"""

import asyncio
import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tyrantcam.domain.model.vote import Vote, VoteOutcome
from tyrantcam.domain.repository import TyrantRepository, VoteRepository
from tyrantcam.domain.service import VoteService
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId
from tyrantcam.persistence.database import transaction
from tyrantcam.persistence.repository import (
    PostgresTyrantRepository,
    PostgresVoteRepository,
)
from tests.conftest import FINGERPRINT_A, FINGERPRINT_B, make_tyrant
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("TYRANTCAM_INTEGRATION") != "1",
        reason="set TYRANTCAM_INTEGRATION=1 to run against PostgreSQL",
    ),
]

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _vote(tyrant_id: TyrantId, fingerprint: str) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        tyrant_id=tyrant_id,
        fingerprint=Fingerprint(fingerprint),
        created_at=datetime.now(timezone.utc),
    )


class TestVoteRepositoryIntegration:
    """Integration tests for the vote ledger."""

    @pytest.mark.asyncio
    async def test_save_increments_and_delete_decrements(self, integration_env):
        """Counter follows the ledger through inserts and deletes."""
        # Arrange
        tyrant_repo = await integration_env.get(TyrantRepository)
        vote_repo = await integration_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant(name=f"Tyrant {uuid4().hex[:8]}"))
        first = _vote(tyrant.id, FINGERPRINT_A)

        # Act
        after_first = await vote_repo.save(first)
        after_second = await vote_repo.save(_vote(tyrant.id, FINGERPRINT_B))
        deleted = await vote_repo.delete(first.id)

        # Assert
        assert after_first == 1
        assert after_second == 2
        assert deleted is not None
        assert deleted.id == first.id
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1
        assert await vote_repo.count_by_tyrant(tyrant.id) == 1

    @pytest.mark.asyncio
    async def test_duplicate_pair_raises_and_keeps_count(self, integration_env):
        """The unique index rejects a second vote without touching the counter."""
        # Arrange
        tyrant_repo = await integration_env.get(TyrantRepository)
        vote_repo = await integration_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant(name=f"Tyrant {uuid4().hex[:8]}"))
        await vote_repo.save(_vote(tyrant.id, FINGERPRINT_A))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(_vote(tyrant.id, FINGERPRINT_A))

        # The savepoint rollback leaves the outer transaction usable
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    async def test_service_scenario(self, integration_env):
        """Two visitors, a repeat and a revoke end at one live vote."""
        # Arrange
        tyrant_repo = await integration_env.get(TyrantRepository)
        vote_service = await integration_env.get(VoteService)
        tyrant = await tyrant_repo.save(make_tyrant(name=f"Tyrant {uuid4().hex[:8]}"))

        # Act
        first = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)
        repeat = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)
        second = await vote_service.cast_vote(tyrant.id, FINGERPRINT_B)
        revoked = await vote_service.revoke_vote(first.vote.id, is_admin=True)

        # Assert
        assert first.shame_count == 1
        assert repeat.outcome == VoteOutcome.DUPLICATE_VOTE
        assert second.shame_count == 2
        assert revoked.ok
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    async def test_tyrant_delete_cascades(self, integration_env):
        """Votes disappear with their tyrant."""
        # Arrange
        tyrant_repo = await integration_env.get(TyrantRepository)
        vote_repo = await integration_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant(name=f"Tyrant {uuid4().hex[:8]}"))
        vote = _vote(tyrant.id, FINGERPRINT_A)
        await vote_repo.save(vote)

        # Act
        deleted = await tyrant_repo.delete(tyrant.id)

        # Assert
        assert deleted is True
        assert await vote_repo.find_by_id(vote.id) is None

    @pytest.mark.asyncio
    async def test_concurrent_distinct_votes_lose_no_updates(self, integration_env):
        """Parallel transactions from N visitors leave shame_count at exactly N."""
        # Arrange
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        async with transaction(session_factory) as session:
            tyrant = await PostgresTyrantRepository(session).save(
                make_tyrant(name=f"Tyrant {uuid4().hex[:8]}")
            )

        async def cast(fingerprint: str):
            async with transaction(session_factory) as session:
                service = VoteService(
                    vote_repository=PostgresVoteRepository(session),
                    tyrant_repository=PostgresTyrantRepository(session),
                )
                return await service.cast_vote(tyrant.id, fingerprint)

        # Act
        results = await asyncio.gather(*(cast(f"{i:064x}") for i in range(10)))

        # Assert
        assert all(r.outcome == VoteOutcome.CAST for r in results)
        async with transaction(session_factory) as session:
            stored = await PostgresTyrantRepository(session).find_by_id(tyrant.id)
            live = await PostgresVoteRepository(session).count_by_tyrant(tyrant.id)
        assert stored.shame_count == 10
        assert live == 10
