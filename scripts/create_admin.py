#!/usr/bin/env python3
"""Create an administrator account.

Usage:
    python scripts/create_admin.py admin@example.org
    (the password is read from the terminal, or from ADMIN_PASSWORD)
"""

import argparse
import asyncio
import getpass
import os
import sys

import logfire

from tyrantcam.config import Settings
from tyrantcam.domain.error import ValidationError
from tyrantcam.domain.service import AdminService, LoginRateLimiter
from tyrantcam.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from tyrantcam.persistence.repository import PostgresAdminUserRepository
from tyrantcam.util.observability import configure_logfire


async def create_admin(settings: Settings, email: str, password: str) -> str:
    """Insert the admin in its own transaction.

    Returns:
        The new admin's ID
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    try:
        async with transaction(session_factory) as session:
            service = AdminService(
                admin_repository=PostgresAdminUserRepository(session),
                rate_limiter=LoginRateLimiter(),
            )
            admin = await service.create_admin(email, password)
        return str(admin.id)
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a TyrantCam administrator")
    parser.add_argument("email", help="Admin email address")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    password = os.environ.get("ADMIN_PASSWORD") or getpass.getpass("Password: ")

    try:
        admin_id = asyncio.run(create_admin(settings, args.email, password))
    except (ValidationError, ValueError) as e:
        logfire.error("Admin creation failed", email=args.email, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Created admin {args.email} ({admin_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
