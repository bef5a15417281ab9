"""Vote repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional

from showcase.domain.model.vote import RankedSubmission, Vote
from showcase.domain.value import SubmissionId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find(
        self, submission_id: SubmissionId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a submission.

        Args:
            submission_id: The submission's ID
            voter_id: The voter's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        The uniqueness check on (submission_id, voter_id) and the insert
        happen as one atomic store operation.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            DuplicateVoteError: If the pair already has a vote
        """
        pass

    @abstractmethod
    async def delete(self, submission_id: SubmissionId, voter_id: UserId) -> bool:
        """Delete a voter's vote on a submission.

        Args:
            submission_id: The submission's ID
            voter_id: The voter's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_submission(self, submission_id: SubmissionId) -> int:
        """Delete every vote on a submission.

        Args:
            submission_id: The submission's ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count_by_voter(self, voter_id: UserId) -> int:
        """Count a voter's active votes."""
        pass

    @abstractmethod
    async def count_by_submission(self, submission_id: SubmissionId) -> int:
        """Count active votes on a submission."""
        pass

    @abstractmethod
    async def list_ranked(self, limit: int) -> List[RankedSubmission]:
        """List submissions ranked by vote total.

        Order is total votes descending, then created_at ascending, then ID,
        so repeated calls over unchanged data return the same order.
        Submissions without votes are included with a total of zero.

        Args:
            limit: Maximum number of rows to return

        Returns:
            Ranked submissions
        """
        pass

    @abstractmethod
    def voter_lock(self, voter_id: UserId) -> AbstractAsyncContextManager[None]:
        """Serialize cast attempts by one voter.

        Held around the vote-cap check and the insert so concurrent casts
        from the same voter cannot both pass the cap check.

        Args:
            voter_id: The voter's ID

        Returns:
            Async context manager holding the lock while entered
        """
        pass
