"""In-memory vote repository for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from showcase.domain.error import DuplicateVoteError
from showcase.domain.model.vote import RankedSubmission, Vote
from showcase.domain.repository.vote import VoteRepository
from showcase.domain.value import SubmissionId, UserId

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find(
        self, submission_id: SubmissionId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a submission."""
        return self._db.votes.get((submission_id, voter_id))

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Check and insert run without yielding to the event loop, so they
        are atomic with respect to other tasks.

        Raises:
            DuplicateVoteError: If the pair already has a vote
        """
        key = (vote.submission_id, vote.voter_id)
        if key in self._db.votes:
            raise DuplicateVoteError(vote.submission_id, str(vote.voter_id))

        self._db.votes[key] = vote
        return vote

    async def delete(self, submission_id: SubmissionId, voter_id: UserId) -> bool:
        """Delete a voter's vote on a submission."""
        return self._db.votes.pop((submission_id, voter_id), None) is not None

    async def delete_by_submission(self, submission_id: SubmissionId) -> int:
        """Delete every vote on a submission."""
        keys = [k for k in self._db.votes if k[0] == submission_id]
        for key in keys:
            del self._db.votes[key]
        return len(keys)

    async def count_by_voter(self, voter_id: UserId) -> int:
        """Count a voter's active votes."""
        return sum(1 for (_, v) in self._db.votes if v == voter_id)

    async def count_by_submission(self, submission_id: SubmissionId) -> int:
        """Count active votes on a submission."""
        return sum(1 for (s, _) in self._db.votes if s == submission_id)

    async def list_ranked(self, limit: int) -> list[RankedSubmission]:
        """List submissions ranked by vote total."""
        totals: dict[SubmissionId, int] = {}
        for submission_id, _ in self._db.votes:
            totals[submission_id] = totals.get(submission_id, 0) + 1

        ranked = [
            RankedSubmission(submission=s, total_votes=totals.get(s.id, 0))
            for s in self._db.submissions.values()
        ]
        ranked.sort(key=lambda r: (-r.total_votes, r.submission.created_at, r.submission.id))
        return ranked[:limit]

    @asynccontextmanager
    async def voter_lock(self, voter_id: UserId) -> AsyncIterator[None]:
        """Hold the voter's asyncio lock."""
        async with self._db.voter_locks[voter_id]:
            yield
