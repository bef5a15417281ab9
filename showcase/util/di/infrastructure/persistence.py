"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from showcase.config import Settings
from showcase.domain.repository import (
    SubmissionRepository,
    Transaction,
    VoteRepository,
)
from showcase.persistence.database import create_engine, create_session_factory
from showcase.persistence.repository import (
    PostgresSubmissionRepository,
    PostgresTransaction,
    PostgresVoteRepository,
)
from showcase.util.di.base import ProviderBase
from showcase.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Write use cases commit through the Transaction before returning. Any
        writes still pending are committed at the end of the request if no
        exception occurred, or rolled back if one was raised. Advisory locks
        taken by the vote repository are released with the transaction.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, session: AsyncSession) -> Transaction:
        """Provide the request transaction."""
        return PostgresTransaction(session)

    @provide(scope=Scope.REQUEST)
    def get_submission_repository(self, session: AsyncSession) -> SubmissionRepository:
        """Provide Submission repository."""
        return PostgresSubmissionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
