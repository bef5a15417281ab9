"""Get own submission use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import SubmissionService
from showcase.domain.value import UserId

from .common import SubmissionResponse


class GetOwnSubmissionRequest(BaseModel):
    """Get own submission request."""

    user_id: str


class GetOwnSubmissionResponse(BaseModel):
    """The caller's submission, or None if they have not submitted yet."""

    submission: SubmissionResponse | None


class GetOwnSubmissionUseCase(BaseUseCase):
    """Use case for looking up the authenticated user's submission."""

    def __init__(self, submission_service: SubmissionService) -> None:
        self.submission_service = submission_service

    async def execute(
        self, request: GetOwnSubmissionRequest
    ) -> GetOwnSubmissionResponse:
        submission = await self.submission_service.get_submission_by_owner(
            UserId(UUID(request.user_id))
        )
        return GetOwnSubmissionResponse(
            submission=SubmissionResponse.from_submission(submission)
            if submission
            else None
        )
