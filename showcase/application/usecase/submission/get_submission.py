"""Get submission use case."""

from typing import Optional

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import SubmissionService
from showcase.domain.value import SubmissionId

from .common import SubmissionResponse


class GetSubmissionRequest(BaseModel):
    """Get submission request."""

    submission_id: str


class GetSubmissionUseCase(BaseUseCase):
    """Use case for retrieving a submission by ID."""

    def __init__(self, submission_service: SubmissionService) -> None:
        self.submission_service = submission_service

    async def execute(
        self, request: GetSubmissionRequest
    ) -> Optional[SubmissionResponse]:
        """Execute get submission flow.

        Returns:
            Submission details if found, None otherwise
        """
        submission = await self.submission_service.get_submission(
            SubmissionId(request.submission_id)
        )
        if not submission:
            return None
        return SubmissionResponse.from_submission(submission)
