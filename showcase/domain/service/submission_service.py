"""Submission domain service."""

from datetime import datetime

import logfire

from showcase.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from showcase.domain.model.submission import Submission
from showcase.domain.repository import SubmissionRepository, VoteRepository
from showcase.domain.value import SubmissionId, SubmissionTitle, UserId

from .base import Service


class SubmissionService(Service):
    """Domain service for submission operations."""

    def __init__(
        self,
        submission_repository: SubmissionRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize submission service.

        Args:
            submission_repository: Submission repository
            vote_repository: Vote repository (votes are removed with their submission)
        """
        self.submission_repository = submission_repository
        self.vote_repository = vote_repository

    async def get_submission(self, submission_id: SubmissionId) -> Submission | None:
        """Get a submission by ID.

        Args:
            submission_id: Submission ID

        Returns:
            Submission if found, None otherwise
        """
        with logfire.span(
            "submission_service.get_submission", submission_id=submission_id
        ):
            submission = await self.submission_repository.find_by_id(submission_id)
            if not submission:
                logfire.info("Submission not found", submission_id=submission_id)
            return submission

    async def get_submission_by_owner(self, owner_id: UserId) -> Submission | None:
        """Get the submission owned by a user, if any."""
        with logfire.span(
            "submission_service.get_submission_by_owner", owner_id=str(owner_id)
        ):
            return await self.submission_repository.find_by_owner(owner_id)

    async def create_submission(
        self, submission_id: SubmissionId, owner_id: UserId, title: str
    ) -> Submission:
        """Register a user's submission.

        Args:
            submission_id: Identifier of the external showcase entry
            owner_id: Submitting user
            title: Display title (surrounding whitespace is stripped)

        Returns:
            Created submission

        Raises:
            BusinessRuleViolationError: If the user already has a submission
            DuplicateSubmissionError: If the identifier is already registered
        """
        with logfire.span(
            "submission_service.create_submission",
            submission_id=submission_id,
            owner_id=str(owner_id),
        ):
            existing = await self.submission_repository.find_by_owner(owner_id)
            if existing:
                logfire.warn(
                    "Second submission attempt",
                    owner_id=str(owner_id),
                    existing_submission_id=existing.id,
                )
                raise BusinessRuleViolationError("You have already submitted an entry")

            now = datetime.now()
            submission = Submission(
                id=submission_id,
                owner_id=owner_id,
                title=SubmissionTitle(title).root,
                created_at=now,
                updated_at=now,
            )

            saved = await self.submission_repository.save(submission)
            logfire.info("Submission created", submission_id=saved.id)
            return saved

    async def delete_own_submission(
        self, submission_id: SubmissionId, owner_id: UserId
    ) -> None:
        """Delete a submission on behalf of its owner.

        Votes on the submission are deleted with it.

        Args:
            submission_id: Submission to delete
            owner_id: User requesting the deletion

        Raises:
            NotFoundError: If the submission does not exist
            NotAuthorizedError: If the user does not own the submission
        """
        with logfire.span(
            "submission_service.delete_own_submission",
            submission_id=submission_id,
            owner_id=str(owner_id),
        ):
            submission = await self.submission_repository.find_by_id(submission_id)
            if not submission:
                raise NotFoundError("Submission", submission_id)
            if submission.owner_id != owner_id:
                logfire.warn(
                    "Unauthorized submission delete attempt",
                    submission_id=submission_id,
                    user_id=str(owner_id),
                )
                raise NotAuthorizedError("submission", submission_id, str(owner_id))

            removed_votes = await self.vote_repository.delete_by_submission(
                submission_id
            )
            await self.submission_repository.delete(submission_id, owner_id)

            logfire.info(
                "Submission deleted",
                submission_id=submission_id,
                removed_votes=removed_votes,
            )
