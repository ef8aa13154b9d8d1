"""Test configuration and fixtures."""

import asyncio
from datetime import datetime
from uuid import uuid4

import logfire
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from tyrantcam.domain.model.tyrant import Tyrant
from tyrantcam.domain.service import AdminService
from tyrantcam.domain.value import TyrantCategory, TyrantId
from tests.di import build_test_container

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

FINGERPRINT_A = "a" * 64
FINGERPRINT_B = "b" * 64

ADMIN_EMAIL = "admin@tyrantcam.org"
ADMIN_PASSWORD = "admin-password-123"


def make_tyrant(
    name: str = "Governor Example",
    category: TyrantCategory = TyrantCategory.STATE,
    is_published: bool = True,
    created_at: datetime | None = None,
) -> Tyrant:
    """Helper to build a valid tyrant for tests.

    Repositories reset shame_count to 0 on save, so callers get counts only
    by casting votes.
    """
    now = created_at or datetime.now()
    return Tyrant(
        id=TyrantId(uuid4()),
        name=name,
        title="Governor",
        position="Governor of Example State",
        category=category,
        description="Signed an order that bypassed the legislature.",
        shame_count=0,
        is_published=is_published,
        created_at=now,
        updated_at=now,
    )


async def _seed_admin(container: AsyncContainer) -> None:
    async with container() as request_container:
        admin_service = await request_container.get(AdminService)
        await admin_service.create_admin(ADMIN_EMAIL, ADMIN_PASSWORD)


def build_client() -> TestClient:
    """Create a test client over in-memory persistence with one admin account.

    Every client gets its own container, so state never leaks between tests.
    """
    # Imported here so logfire is configured before the app module loads
    from tyrantcam.interface.api.app import create_app

    container = build_test_container()
    asyncio.run(_seed_admin(container))
    return TestClient(create_app(container=container))


def login(client: TestClient) -> None:
    """Log the seeded admin in; the session cookie stays on the client."""
    response = client.post(
        "/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
