"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.repository import Transaction
from showcase.domain.service import VoteService
from showcase.domain.value import CastOutcome, SubmissionId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    submission_id: str
    user_id: str | None = None  # None when the caller is anonymous


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    outcome: CastOutcome
    message: str
    already_voted: bool
    succeeded: bool


class CastVoteUseCase(BaseUseCase):
    """Use case for casting a vote on a submission."""

    def __init__(self, vote_service: VoteService, transaction: Transaction) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            transaction: Request transaction, committed before returning
        """
        self.vote_service = vote_service
        self.transaction = transaction

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Rule violations come back as outcomes rather than exceptions.

        Args:
            request: Cast vote request

        Returns:
            Cast outcome

        Raises:
            InfrastructureError: If the store fails
        """
        voter_id = UserId(UUID(request.user_id)) if request.user_id else None

        result = await self.vote_service.cast_vote(
            SubmissionId(request.submission_id), voter_id
        )
        await self.transaction.commit()

        return CastVoteResponse(
            outcome=result.outcome,
            message=result.message,
            already_voted=result.already_voted,
            succeeded=result.succeeded,
        )
