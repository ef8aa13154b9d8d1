"""Unit tests for VoteService."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from tyrantcam.domain.model.vote import Vote, VoteOutcome
from tyrantcam.domain.repository import TyrantRepository, VoteRepository
from tyrantcam.domain.service import VoteService
from tyrantcam.domain.value import Fingerprint, TyrantId, VoteId
from tests.conftest import FINGERPRINT_A, FINGERPRINT_B, make_tyrant
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_increments_shame_count(self, unit_env):
        """A first vote should be recorded and bump the count to 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())

        # Act
        result = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Assert
        assert result.ok
        assert result.outcome == VoteOutcome.CAST
        assert result.shame_count == 1
        assert result.vote is not None
        assert result.vote.tyrant_id == tyrant.id
        assert result.vote.created_at.utcoffset() == timedelta(0)

        stored = await vote_repo.find_by_id(result.vote.id)
        assert stored is not None
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    async def test_duplicate_vote_leaves_count_unchanged(self, unit_env):
        """Two visitors, one repeat: count is 2 and the repeat is a duplicate."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        tyrant = await tyrant_repo.save(make_tyrant())

        # Act
        first = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)
        second = await vote_service.cast_vote(tyrant.id, FINGERPRINT_B)
        repeat = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Assert
        assert first.shame_count == 1
        assert second.shame_count == 2
        assert repeat.outcome == VoteOutcome.DUPLICATE_VOTE
        assert repeat.vote is None
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 2

    @pytest.mark.asyncio
    async def test_fingerprint_case_does_not_bypass_uniqueness(self, unit_env):
        """Upper-case digests should be treated as the same visitor."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Act
        result = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A.upper())

        # Assert
        assert result.outcome == VoteOutcome.DUPLICATE_VOTE

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_votes_count_once(self, unit_env):
        """Racing votes from one visitor should produce exactly one success."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        tyrant = await tyrant_repo.save(make_tyrant())

        # Act
        results = await asyncio.gather(
            *(vote_service.cast_vote(tyrant.id, FINGERPRINT_A) for _ in range(5))
        )

        # Assert
        outcomes = [r.outcome for r in results]
        assert outcomes.count(VoteOutcome.CAST) == 1
        assert outcomes.count(VoteOutcome.DUPLICATE_VOTE) == 4
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_votes_from_distinct_visitors_are_all_counted(
        self, unit_env
    ):
        """Racing votes from N visitors should leave the count at exactly N."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        fingerprints = [f"{i:064x}" for i in range(20)]

        # Act
        results = await asyncio.gather(
            *(vote_service.cast_vote(tyrant.id, fp) for fp in fingerprints)
        )

        # Assert
        assert all(r.outcome == VoteOutcome.CAST for r in results)
        assert sorted(r.shame_count for r in results) == list(range(1, 21))
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 20
        assert await vote_repo.count_by_tyrant(tyrant.id) == 20

    @pytest.mark.asyncio
    async def test_unknown_tyrant_returns_not_found(self, unit_env):
        """Voting on a missing tyrant should not create a vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant_id = TyrantId(uuid4())

        # Act
        result = await vote_service.cast_vote(tyrant_id, FINGERPRINT_A)

        # Assert
        assert result.outcome == VoteOutcome.NOT_FOUND
        assert await vote_repo.count_by_tyrant(tyrant_id) == 0

    @pytest.mark.asyncio
    async def test_unpublished_tyrant_accepts_votes(self, unit_env):
        """Any existing tyrant can be shamed; visibility is a caller concern."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        tyrant = await tyrant_repo.save(make_tyrant(is_published=False))

        # Act
        result = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Assert
        assert result.outcome == VoteOutcome.CAST
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fingerprint",
        ["", "abc", "z" * 64, "a" * 63, "a" * 65, "a" * 64 + "\n", "\n" + "a" * 64],
    )
    async def test_malformed_fingerprint_returns_validation_error(
        self, unit_env, fingerprint
    ):
        """Fingerprints must be 64 hex characters."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())

        # Act
        result = await vote_service.cast_vote(tyrant.id, fingerprint)

        # Assert
        assert result.outcome == VoteOutcome.VALIDATION_ERROR
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 0
        assert await vote_repo.count_by_tyrant(tyrant.id) == 0


class TestRevokeVote:
    """Tests for revoke_vote method."""

    @pytest.mark.asyncio
    async def test_admin_revoke_decrements_count(self, unit_env):
        """Revoking should delete the vote and lower the count."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        cast = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)
        await vote_service.cast_vote(tyrant.id, FINGERPRINT_B)

        # Act
        result = await vote_service.revoke_vote(cast.vote.id, is_admin=True)

        # Assert
        assert result.ok
        assert result.tyrant_id == tyrant.id
        assert await vote_repo.find_by_id(cast.vote.id) is None
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    async def test_revoked_visitor_can_vote_again(self, unit_env):
        """Once a vote is revoked the pair is free again."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        cast = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)
        await vote_service.revoke_vote(cast.vote.id, is_admin=True)

        # Act
        result = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Assert
        assert result.outcome == VoteOutcome.CAST
        assert result.shame_count == 1

    @pytest.mark.asyncio
    async def test_revoke_without_admin_is_rejected(self, unit_env):
        """Non-admin callers should not be able to remove votes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        cast = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Act
        result = await vote_service.revoke_vote(cast.vote.id, is_admin=False)

        # Assert
        assert result.outcome == VoteOutcome.NOT_AUTHORIZED
        assert await vote_repo.find_by_id(cast.vote.id) is not None
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 1

    @pytest.mark.asyncio
    async def test_revoke_unknown_vote_returns_not_found(self, unit_env):
        """Revoking a missing vote is reported, not raised."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act
        result = await vote_service.revoke_vote(VoteId(uuid4()), is_admin=True)

        # Assert
        assert result.outcome == VoteOutcome.NOT_FOUND

    @pytest.mark.asyncio
    async def test_concurrent_revokes_of_one_vote_decrement_once(self, unit_env):
        """Only one of several racing revokes succeeds; the count ends at zero."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        cast = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Act
        results = await asyncio.gather(
            *(vote_service.revoke_vote(cast.vote.id, is_admin=True) for _ in range(5))
        )

        # Assert
        outcomes = [r.outcome for r in results]
        assert outcomes.count(VoteOutcome.REVOKED) == 1
        assert outcomes.count(VoteOutcome.NOT_FOUND) == 4
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 0
        assert await vote_repo.count_by_tyrant(tyrant.id) == 0

    @pytest.mark.asyncio
    async def test_revoke_never_drives_count_negative(self, unit_env):
        """A counter already at zero stays at zero."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        cast = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Simulate a drifted counter
        drifted = (await tyrant_repo.find_by_id(tyrant.id)).model_copy(
            update={"shame_count": 0}
        )
        vote_repo._store.tyrants[tyrant.id] = drifted

        # Act
        result = await vote_service.revoke_vote(cast.vote.id, is_admin=True)

        # Assert
        assert result.ok
        assert (await tyrant_repo.find_by_id(tyrant.id)).shame_count == 0


class TestHasVoted:
    """Tests for has_voted method."""

    @pytest.mark.asyncio
    async def test_recent_vote_is_reported(self, unit_env):
        """A vote inside the window should be reported."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Act & Assert
        assert await vote_service.has_voted(tyrant.id, FINGERPRINT_A)
        assert not await vote_service.has_voted(tyrant.id, FINGERPRINT_B)

    @pytest.mark.asyncio
    async def test_old_vote_outside_window_is_not_reported(self, unit_env):
        """The window is a display hint; old votes fall outside it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                tyrant_id=tyrant.id,
                fingerprint=Fingerprint(FINGERPRINT_A),
                created_at=datetime.now(timezone.utc) - timedelta(hours=48),
            )
        )

        # Act & Assert
        assert not await vote_service.has_voted(tyrant.id, FINGERPRINT_A, 24)
        assert await vote_service.has_voted(tyrant.id, FINGERPRINT_A, 72)

    @pytest.mark.asyncio
    async def test_old_vote_still_blocks_new_vote(self, unit_env):
        """Uniqueness never expires even when the window has passed."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        vote_repo = await unit_env.get(VoteRepository)
        tyrant = await tyrant_repo.save(make_tyrant())
        await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                tyrant_id=tyrant.id,
                fingerprint=Fingerprint(FINGERPRINT_A),
                created_at=datetime.now(timezone.utc) - timedelta(days=30),
            )
        )

        # Act
        result = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Assert
        assert result.outcome == VoteOutcome.DUPLICATE_VOTE

    @pytest.mark.asyncio
    async def test_malformed_fingerprint_is_false(self, unit_env):
        """Malformed input never matches a vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        assert not await vote_service.has_voted(TyrantId(uuid4()), "not-a-digest")


class TestVotedTyrantIds:
    """Tests for voted_tyrant_ids method."""

    @pytest.mark.asyncio
    async def test_returns_only_shamed_tyrants(self, unit_env):
        """Only tyrants the visitor voted on are returned."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        shamed = await tyrant_repo.save(make_tyrant(name="Shamed"))
        other = await tyrant_repo.save(make_tyrant(name="Other"))
        await vote_service.cast_vote(shamed.id, FINGERPRINT_A)

        # Act
        voted = await vote_service.voted_tyrant_ids(
            FINGERPRINT_A, [shamed.id, other.id]
        )

        # Assert
        assert voted == {shamed.id}
