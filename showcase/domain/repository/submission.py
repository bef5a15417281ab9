"""Submission repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from showcase.domain.model.submission import Submission
from showcase.domain.value import SubmissionId, UserId


class SubmissionRepository(ABC):
    """Repository for Submission entity.

    Defines the contract for submission persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, submission_id: SubmissionId) -> Optional[Submission]:
        """Find a submission by ID.

        Args:
            submission_id: The submission's identifier

        Returns:
            The submission if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> Optional[Submission]:
        """Find the submission owned by a user.

        Args:
            owner_id: The owner's user ID

        Returns:
            The user's submission if any, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, submission: Submission) -> Submission:
        """Insert a new submission.

        Args:
            submission: The submission to save

        Returns:
            The saved submission

        Raises:
            DuplicateSubmissionError: If the identifier is already taken
        """
        pass

    @abstractmethod
    async def delete(self, submission_id: SubmissionId, owner_id: UserId) -> bool:
        """Delete a submission owned by the given user.

        Args:
            submission_id: The submission to delete
            owner_id: Owner the submission must belong to

        Returns:
            True if a submission was deleted, False otherwise
        """
        pass
