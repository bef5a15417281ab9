"""PostgreSQL implementation of Submission repository."""

from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.error import BusinessRuleViolationError, DuplicateSubmissionError
from showcase.domain.model import Submission
from showcase.domain.repository import SubmissionRepository
from showcase.domain.value import SubmissionId, UserId
from showcase.persistence.database import translate_store_errors
from showcase.persistence.mappers import row_to_submission, submission_to_dict
from showcase.persistence.tables import submissions_table


class PostgresSubmissionRepository(SubmissionRepository):
    """PostgreSQL implementation of SubmissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Find a submission by ID."""
        stmt = select(submissions_table).where(submissions_table.c.id == submission_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_submission(row._asdict()) if row else None

    @translate_store_errors
    async def find_by_owner(self, owner_id: UserId) -> Optional[Submission]:
        """Find the submission owned by a user."""
        stmt = select(submissions_table).where(submissions_table.c.owner_id == owner_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_submission(row._asdict()) if row else None

    @translate_store_errors
    async def save(self, submission: Submission) -> Submission:
        """Insert a submission.

        Conflicts on either the ID or the one-per-owner constraint insert
        nothing; the follow-up lookup tells them apart.
        """
        stmt = (
            insert(submissions_table)
            .values(**submission_to_dict(submission))
            .on_conflict_do_nothing()
            .returning(submissions_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            if await self.find_by_id(submission.id):
                raise DuplicateSubmissionError(submission.id)
            raise BusinessRuleViolationError("You have already submitted an entry")
        await self.session.flush()
        return submission

    @translate_store_errors
    async def delete(self, submission_id: SubmissionId, owner_id: UserId) -> bool:
        """Delete a submission owned by the given user.

        Votes go with it through ON DELETE CASCADE.
        """
        stmt = delete(submissions_table).where(
            and_(
                submissions_table.c.id == submission_id,
                submissions_table.c.owner_id == owner_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
