"""Create submission use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.repository import Transaction
from showcase.domain.service import SubmissionService
from showcase.domain.value import (
    SubmissionId,
    UserId,
    is_valid_submission_id,
    submission_id_from_url,
)

from .common import SubmissionResponse


class CreateSubmissionRequest(BaseModel):
    """Create submission request.

    Accepts either the submission ID itself or the showcase URL it is
    derived from.
    """

    submission_id: str | None = None
    url: str | None = None
    title: str
    user_id: str  # User ID from authenticated user

    @model_validator(mode="after")
    def check_identifier(self) -> "CreateSubmissionRequest":
        """Validate that exactly one of submission_id or url is provided."""
        if not self.submission_id and not self.url:
            raise ValueError("Either submission_id or url must be provided")
        if self.submission_id and self.url:
            raise ValueError("Provide either submission_id or url, not both")
        if self.submission_id and not is_valid_submission_id(self.submission_id):
            raise ValueError(f"Invalid submission ID: {self.submission_id}")
        return self

    def resolve_submission_id(self) -> SubmissionId:
        if self.submission_id:
            return SubmissionId(self.submission_id)
        return submission_id_from_url(self.url or "")


class CreateSubmissionUseCase(BaseUseCase):
    """Use case for registering the caller's submission."""

    def __init__(
        self, submission_service: SubmissionService, transaction: Transaction
    ) -> None:
        """Initialize create submission use case.

        Args:
            submission_service: Submission domain service
            transaction: Request transaction, committed before returning
        """
        self.submission_service = submission_service
        self.transaction = transaction

    async def execute(self, request: CreateSubmissionRequest) -> SubmissionResponse:
        """Execute create submission flow.

        Args:
            request: Create submission request

        Returns:
            Created submission

        Raises:
            ValueError: If the URL or title is invalid
            BusinessRuleViolationError: If the user already has a submission
            DuplicateSubmissionError: If the ID is already registered
        """
        submission = await self.submission_service.create_submission(
            submission_id=request.resolve_submission_id(),
            owner_id=UserId(UUID(request.user_id)),
            title=request.title,
        )
        await self.transaction.commit()
        return SubmissionResponse.from_submission(submission)
