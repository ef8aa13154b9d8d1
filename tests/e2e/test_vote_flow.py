"""End-to-end tests for browsing and shaming tyrants."""

from uuid import uuid4

import pytest

from tests.conftest import build_client, login


@pytest.fixture
def client():
    """Create test client."""
    return build_client()


def _create_tyrant(client, is_published: bool = True, name: str = "Governor Example"):
    login(client)
    response = client.post(
        "/admin/tyrants",
        json={
            "name": name,
            "title": "Governor",
            "position": "Governor of Example State",
            "category": "state",
            "description": "Signed an order that bypassed the legislature.",
            "is_published": is_published,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    """Health endpoint."""

    def test_health(self, client):
        """Should report the service as healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client):
        """Should report the entry store as reachable."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "ok"}


class TestVoteFlow:
    """End-to-end tests for the vote ledger."""

    def test_vote_then_duplicate(self, client):
        """First vote creates, repeat vote reports already shamed."""
        # Arrange
        tyrant = _create_tyrant(client)
        assert tyrant["shame_count"] == 0

        # Act
        first = client.post(f"/tyrants/{tyrant['id']}/vote")
        repeat = client.post(f"/tyrants/{tyrant['id']}/vote")

        # Assert
        assert first.status_code == 201
        assert first.json()["outcome"] == "cast"
        assert first.json()["shame_count"] == 1
        assert first.json()["already_voted"] is False

        assert repeat.status_code == 200
        assert repeat.json()["outcome"] == "duplicate_vote"
        assert repeat.json()["already_voted"] is True
        assert repeat.json()["shame_count"] == 1

    def test_listing_reflects_votes(self, client):
        """The leaderboard shows counts and the caller's vote state."""
        # Arrange
        shamed = _create_tyrant(client, name="Shamed Governor")
        quiet = _create_tyrant(client, name="Quiet Governor")
        client.post(f"/tyrants/{shamed['id']}/vote")

        # Act
        response = client.get("/tyrants")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [t["id"] for t in data["tyrants"]] == [shamed["id"], quiet["id"]]
        assert data["tyrants"][0]["shame_count"] == 1
        assert data["tyrants"][0]["has_voted"] is True
        assert data["tyrants"][1]["has_voted"] is False

    def test_category_filter(self, client):
        """Only tyrants in the requested category are listed."""
        # Arrange
        _create_tyrant(client)

        # Act
        state = client.get("/tyrants", params={"category": "state"})
        federal = client.get("/tyrants", params={"category": "federal"})
        invalid = client.get("/tyrants", params={"category": "galactic"})

        # Assert
        assert state.json()["total"] == 1
        assert federal.json()["total"] == 0
        assert invalid.status_code == 422

    def test_check_vote(self, client):
        """The recent-vote check flips after voting."""
        # Arrange
        tyrant = _create_tyrant(client)
        url = f"/tyrants/{tyrant['id']}/vote"

        # Act
        before = client.get(url)
        client.post(url)
        after = client.get(url, params={"window_hours": 1})

        # Assert
        assert before.json()["has_voted"] is False
        assert before.json()["window_hours"] == 24
        assert after.json()["has_voted"] is True
        assert after.json()["window_hours"] == 1

    def test_vote_on_unknown_tyrant(self, client):
        """Unknown IDs are 404, malformed IDs are 422."""
        # Act
        unknown = client.post(f"/tyrants/{uuid4()}/vote")
        malformed = client.post("/tyrants/not-a-uuid/vote")

        # Assert
        assert unknown.status_code == 404
        assert malformed.status_code == 422

    def test_unpublished_tyrant_is_hidden(self, client):
        """Drafts can't be fetched or shamed by visitors."""
        # Arrange
        draft = _create_tyrant(client, is_published=False)

        # Act
        fetched = client.get(f"/tyrants/{draft['id']}")
        voted = client.post(f"/tyrants/{draft['id']}/vote")
        listed = client.get("/tyrants")

        # Assert
        assert fetched.status_code == 404
        assert voted.status_code == 404
        assert listed.json()["total"] == 0

    def test_admin_revokes_vote(self, client):
        """Revoking removes the vote and lowers the count."""
        # Arrange
        tyrant = _create_tyrant(client)
        vote = client.post(f"/tyrants/{tyrant['id']}/vote").json()

        # Act
        revoked = client.delete(f"/admin/votes/{vote['vote_id']}")
        again = client.delete(f"/admin/votes/{vote['vote_id']}")

        # Assert
        assert revoked.status_code == 200
        assert revoked.json()["outcome"] == "revoked"
        assert again.status_code == 404
        assert client.get(f"/tyrants/{tyrant['id']}").json()["shame_count"] == 0

    def test_revoke_requires_admin_session(self, client):
        """Visitors without the admin cookie get 401."""
        # Arrange
        tyrant = _create_tyrant(client)
        vote = client.post(f"/tyrants/{tyrant['id']}/vote").json()
        client.post("/admin/logout")

        # Act
        response = client.delete(f"/admin/votes/{vote['vote_id']}")

        # Assert
        assert response.status_code == 401
        assert client.get(f"/tyrants/{tyrant['id']}").json()["shame_count"] == 1
