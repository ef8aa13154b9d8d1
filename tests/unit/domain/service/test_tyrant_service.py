"""Unit tests for TyrantService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from tyrantcam.domain.error import NotFoundError
from tyrantcam.domain.repository import (
    SubmissionRepository,
    TyrantRepository,
    VoteRepository,
)
from tyrantcam.domain.service import SubmissionService, TyrantService, VoteService
from tyrantcam.domain.value import AdminUserId, TyrantCategory, TyrantId
from tests.conftest import FINGERPRINT_A, FINGERPRINT_B, make_tyrant
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPublished:
    """Tests for list_published method."""

    @pytest.mark.asyncio
    async def test_orders_by_shame_count_then_newest(self, unit_env):
        """Most shamed first; ties broken by newest entry."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)
        vote_service = await unit_env.get(VoteService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        base = datetime(2024, 1, 1, 12, 0, 0)

        old_quiet = await tyrant_repo.save(make_tyrant(name="Old Quiet", created_at=base))
        new_quiet = await tyrant_repo.save(
            make_tyrant(name="New Quiet", created_at=base + timedelta(days=1))
        )
        loud = await tyrant_repo.save(make_tyrant(name="Loud", created_at=base))
        await vote_service.cast_vote(loud.id, FINGERPRINT_A)
        await vote_service.cast_vote(loud.id, FINGERPRINT_B)

        # Act
        tyrants = await tyrant_service.list_published()

        # Assert
        assert [t.id for t in tyrants] == [loud.id, new_quiet.id, old_quiet.id]
        assert tyrants[0].shame_count == 2

    @pytest.mark.asyncio
    async def test_excludes_unpublished_and_filters_category(self, unit_env):
        """Drafts never appear; category narrows the list."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        federal = await tyrant_repo.save(
            make_tyrant(name="Federal", category=TyrantCategory.FEDERAL)
        )
        await tyrant_repo.save(make_tyrant(name="Local", category=TyrantCategory.LOCAL))
        await tyrant_repo.save(
            make_tyrant(
                name="Draft", category=TyrantCategory.FEDERAL, is_published=False
            )
        )

        # Act
        everything = await tyrant_service.list_published()
        federal_only = await tyrant_service.list_published(
            category=TyrantCategory.FEDERAL
        )

        # Assert
        assert {t.name for t in everything} == {"Federal", "Local"}
        assert [t.id for t in federal_only] == [federal.id]
        assert await tyrant_service.count_published() == 2
        assert await tyrant_service.count_published(TyrantCategory.FEDERAL) == 1

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        """limit and offset page through the list."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        base = datetime(2024, 1, 1)
        for i in range(5):
            await tyrant_repo.save(
                make_tyrant(name=f"Tyrant {i}", created_at=base + timedelta(days=i))
            )

        # Act
        page = await tyrant_service.list_published(limit=2, offset=1)

        # Assert
        assert [t.name for t in page] == ["Tyrant 3", "Tyrant 2"]


class TestCreateTyrant:
    """Tests for create_tyrant method."""

    @pytest.mark.asyncio
    async def test_creates_with_zero_count(self, unit_env):
        """New entries start with no shame and unpublished by default."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)

        # Act
        tyrant = await tyrant_service.create_tyrant(
            name="Sheriff Example",
            title="Sheriff",
            position="County Sheriff",
            category=TyrantCategory.LAW_ENFORCEMENT,
            description="Ignored a court order for months.",
        )

        # Assert
        assert tyrant.shame_count == 0
        assert tyrant.is_published is False
        assert await tyrant_service.get_tyrant(tyrant.id) == tyrant

    @pytest.mark.asyncio
    async def test_rejects_short_description(self, unit_env):
        """Descriptions shorter than ten characters are invalid."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)

        # Act & Assert
        with pytest.raises(ValueError):
            await tyrant_service.create_tyrant(
                name="Sheriff Example",
                title="Sheriff",
                position="County Sheriff",
                category=TyrantCategory.LAW_ENFORCEMENT,
                description="Too short",
            )


class TestPublication:
    """Tests for get_published and set_published methods."""

    @pytest.mark.asyncio
    async def test_unpublished_is_hidden_until_published(self, unit_env):
        """get_published raises for drafts and succeeds after publishing."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)
        tyrant_repo = await unit_env.get(TyrantRepository)
        draft = await tyrant_repo.save(make_tyrant(is_published=False))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await tyrant_service.get_published(draft.id)

        published = await tyrant_service.set_published(draft.id, True)
        assert published.is_published
        assert published.updated_at >= draft.updated_at
        assert (await tyrant_service.get_published(draft.id)).id == draft.id

    @pytest.mark.asyncio
    async def test_set_published_unknown_tyrant_raises(self, unit_env):
        """Publishing a missing tyrant raises NotFoundError."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await tyrant_service.set_published(TyrantId(uuid4()), True)


class TestDeleteTyrant:
    """Tests for delete_tyrant method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_votes_and_unlinks_submission(self, unit_env):
        """Deleting removes votes and keeps the submission without a link."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)
        vote_service = await unit_env.get(VoteService)
        submission_service = await unit_env.get(SubmissionService)
        vote_repo = await unit_env.get(VoteRepository)
        submission_repo = await unit_env.get(SubmissionRepository)

        submission = await submission_service.submit(
            tyrant_name="Mayor Example",
            tyrant_title="Mayor",
            category=TyrantCategory.LOCAL,
            description="Closed the public library without a council vote.",
        )
        _, tyrant = await submission_service.approve(
            submission.id, AdminUserId(uuid4())
        )
        await tyrant_service.set_published(tyrant.id, True)
        cast = await vote_service.cast_vote(tyrant.id, FINGERPRINT_A)

        # Act
        await tyrant_service.delete_tyrant(tyrant.id)

        # Assert
        assert await tyrant_service.get_tyrant(tyrant.id) is None
        assert await vote_repo.find_by_id(cast.vote.id) is None
        assert await vote_repo.count_by_tyrant(tyrant.id) == 0
        kept = await submission_repo.find_by_id(submission.id)
        assert kept is not None
        assert kept.tyrant_id is None

    @pytest.mark.asyncio
    async def test_delete_unknown_tyrant_raises(self, unit_env):
        """Deleting a missing tyrant raises NotFoundError."""
        # Arrange
        tyrant_service = await unit_env.get(TyrantService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await tyrant_service.delete_tyrant(TyrantId(uuid4()))
