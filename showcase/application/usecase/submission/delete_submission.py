"""Delete submission use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.repository import Transaction
from showcase.domain.service import SubmissionService
from showcase.domain.value import SubmissionId, UserId


class DeleteSubmissionRequest(BaseModel):
    """Delete submission request."""

    submission_id: str
    user_id: str  # User ID from authenticated user


class DeleteSubmissionResponse(BaseModel):
    """Delete submission response."""

    success: bool


class DeleteSubmissionUseCase(BaseUseCase):
    """Use case for deleting the caller's own submission."""

    def __init__(
        self, submission_service: SubmissionService, transaction: Transaction
    ) -> None:
        """Initialize delete submission use case.

        Args:
            submission_service: Submission domain service
            transaction: Request transaction, committed before returning
        """
        self.submission_service = submission_service
        self.transaction = transaction

    async def execute(
        self, request: DeleteSubmissionRequest
    ) -> DeleteSubmissionResponse:
        """Execute delete submission flow.

        Args:
            request: Delete submission request

        Returns:
            Delete submission response

        Raises:
            NotFoundError: If the submission does not exist
            NotAuthorizedError: If the user does not own the submission
        """
        await self.submission_service.delete_own_submission(
            SubmissionId(request.submission_id),
            UserId(UUID(request.user_id)),
        )
        await self.transaction.commit()
        return DeleteSubmissionResponse(success=True)
