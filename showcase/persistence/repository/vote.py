"""PostgreSQL implementation of Vote repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import List, Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.error import DuplicateVoteError, InfrastructureError
from showcase.domain.model import RankedSubmission, Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import SubmissionId, UserId
from showcase.persistence.database import translate_store_errors
from showcase.persistence.mappers import (
    row_to_ranked_submission,
    row_to_vote,
    vote_to_dict,
)
from showcase.persistence.tables import submissions_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find(
        self, submission_id: SubmissionId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a submission."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.submission_id == submission_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    @translate_store_errors
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        ON CONFLICT DO NOTHING on the unique (submission_id, voter_id)
        constraint makes check and insert one statement; a concurrent insert
        of the same pair blocks until the first commits, then inserts nothing.
        """
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(constraint="uq_vote_submission_voter")
            .returning(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise DuplicateVoteError(vote.submission_id, str(vote.voter_id))
        await self.session.flush()
        return vote

    @translate_store_errors
    async def delete(self, submission_id: SubmissionId, voter_id: UserId) -> bool:
        """Delete a voter's vote on a submission."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.submission_id == submission_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @translate_store_errors
    async def delete_by_submission(self, submission_id: SubmissionId) -> int:
        """Delete every vote on a submission."""
        stmt = delete(votes_table).where(votes_table.c.submission_id == submission_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    @translate_store_errors
    async def count_by_voter(self, voter_id: UserId) -> int:
        """Count a voter's active votes."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.voter_id == voter_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @translate_store_errors
    async def count_by_submission(self, submission_id: SubmissionId) -> int:
        """Count active votes on a submission."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.submission_id == submission_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @translate_store_errors
    async def list_ranked(self, limit: int) -> List[RankedSubmission]:
        """List submissions ranked by vote total."""
        vote_counts = (
            select(
                votes_table.c.submission_id,
                func.count().label("total_votes"),
            )
            .group_by(votes_table.c.submission_id)
            .subquery()
        )
        total_votes = func.coalesce(vote_counts.c.total_votes, 0).label("total_votes")

        stmt = (
            select(submissions_table, total_votes)
            .select_from(
                submissions_table.outerjoin(
                    vote_counts,
                    vote_counts.c.submission_id == submissions_table.c.id,
                )
            )
            .order_by(
                total_votes.desc(),
                submissions_table.c.created_at.asc(),
                submissions_table.c.id.asc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_ranked_submission(row._asdict()) for row in result.fetchall()]

    @asynccontextmanager
    async def voter_lock(self, voter_id: UserId) -> AsyncIterator[None]:
        """Take a transaction-scoped advisory lock keyed by the voter.

        Released by PostgreSQL when the request's transaction ends.
        """
        stmt = select(func.pg_advisory_xact_lock(func.hashtext(str(voter_id))))
        try:
            await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise InfrastructureError("PostgresVoteRepository.voter_lock", e) from e
        yield
