"""In-memory submission repository for testing."""

from typing import Optional

from showcase.domain.error import BusinessRuleViolationError, DuplicateSubmissionError
from showcase.domain.model.submission import Submission
from showcase.domain.repository.submission import SubmissionRepository
from showcase.domain.value import SubmissionId, UserId

from .database import InMemoryDatabase


class InMemorySubmissionRepository(SubmissionRepository):
    """In-memory implementation of SubmissionRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Find a submission by ID."""
        return self._db.submissions.get(submission_id)

    async def find_by_owner(self, owner_id: UserId) -> Optional[Submission]:
        """Find the submission owned by a user."""
        for submission in self._db.submissions.values():
            if submission.owner_id == owner_id:
                return submission
        return None

    async def save(self, submission: Submission) -> Submission:
        """Insert a submission.

        Raises:
            DuplicateSubmissionError: If the ID is taken
            BusinessRuleViolationError: If the owner already has a submission
        """
        if submission.id in self._db.submissions:
            raise DuplicateSubmissionError(submission.id)
        if await self.find_by_owner(submission.owner_id):
            raise BusinessRuleViolationError("You have already submitted an entry")

        self._db.submissions[submission.id] = submission
        return submission

    async def delete(self, submission_id: SubmissionId, owner_id: UserId) -> bool:
        """Delete a submission owned by the given user, cascading to its votes."""
        submission = self._db.submissions.get(submission_id)
        if submission is None or submission.owner_id != owner_id:
            return False

        del self._db.submissions[submission_id]
        for key in [k for k in self._db.votes if k[0] == submission_id]:
            del self._db.votes[key]
        return True
