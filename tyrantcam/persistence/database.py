"""PostgreSQL engine and sessions.

The API gets one session per request from the DI container. Scripts that run
outside a request use transaction() instead.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tyrantcam.config import Settings

APPLICATION_NAME = "tyrantcam-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine from database settings."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        # Shows up in pg_stat_activity next to vote ledger locks
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Rows are mapped to frozen domain models right after each query, so
    sessions never need to refresh expired ORM state.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session that commits on success and rolls back on error.

    Args:
        session_factory: Factory from create_session_factory()

    Yields:
        Session inside an open transaction
    """
    async with session_factory() as session:
        async with session.begin():
            yield session
