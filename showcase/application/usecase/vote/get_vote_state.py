"""Get vote state use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import VoteService
from showcase.domain.value import SubmissionId, UserId


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    submission_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetVoteStateResponse(BaseModel):
    """Get vote state response."""

    submission_id: str
    has_voted: bool
    total_votes: int


class GetVoteStateUseCase(BaseUseCase):
    """Use case for reading a submission's vote total and the caller's vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStateRequest) -> GetVoteStateResponse:
        """Execute get vote state flow.

        Args:
            request: Submission ID and optional user ID

        Returns:
            Vote total and whether the user has voted
        """
        voter_id = UserId(UUID(request.user_id)) if request.user_id else None

        state = await self.vote_service.get_vote_state(
            SubmissionId(request.submission_id), voter_id
        )

        return GetVoteStateResponse(
            submission_id=state.submission_id,
            has_voted=state.has_voted,
            total_votes=state.total_votes,
        )
