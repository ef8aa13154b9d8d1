"""PostgreSQL wiring for the repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tyrantcam.config import Settings
from tyrantcam.domain.repository import (
    AdminUserRepository,
    SubmissionRepository,
    TyrantRepository,
    VoteRepository,
)
from tyrantcam.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from tyrantcam.persistence.repository import (
    PostgresAdminUserRepository,
    PostgresSubmissionRepository,
    PostgresTyrantRepository,
    PostgresVoteRepository,
)
from tyrantcam.util.di.base import ProviderBase
from tyrantcam.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Storage for entries, votes, submissions and admins."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL through asyncpg."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Ledger writes open savepoints inside it; everything commits together
        when the request finishes and rolls back if the handler raised.
        """
        try:
            async with transaction(session_factory) as session:
                yield session
        except Exception as e:
            logfire.warn("Request transaction rolled back", error=str(e))
            raise

    @provide(scope=Scope.REQUEST)
    def tyrants(self, session: AsyncSession) -> TyrantRepository:
        return PostgresTyrantRepository(session)

    @provide(scope=Scope.REQUEST)
    def votes(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def submissions(self, session: AsyncSession) -> SubmissionRepository:
        return PostgresSubmissionRepository(session)

    @provide(scope=Scope.REQUEST)
    def admin_users(self, session: AsyncSession) -> AdminUserRepository:
        return PostgresAdminUserRepository(session)
