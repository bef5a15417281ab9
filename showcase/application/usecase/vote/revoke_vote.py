"""Revoke vote use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.repository import Transaction
from showcase.domain.service import VoteService
from showcase.domain.value import RevokeOutcome, SubmissionId, UserId


class RevokeVoteRequest(BaseModel):
    """Revoke vote request."""

    submission_id: str
    user_id: str | None = None  # None when the caller is anonymous


class RevokeVoteResponse(BaseModel):
    """Revoke vote response."""

    outcome: RevokeOutcome
    success: bool
    message: str


class RevokeVoteUseCase(BaseUseCase):
    """Use case for removing the caller's vote from a submission."""

    def __init__(self, vote_service: VoteService, transaction: Transaction) -> None:
        """Initialize revoke vote use case.

        Args:
            vote_service: Vote domain service
            transaction: Request transaction, committed before returning
        """
        self.vote_service = vote_service
        self.transaction = transaction

    async def execute(self, request: RevokeVoteRequest) -> RevokeVoteResponse:
        """Execute revoke vote flow.

        Args:
            request: Revoke vote request

        Returns:
            Revoke outcome; revoking a missing vote still succeeds

        Raises:
            InfrastructureError: If the store fails
        """
        voter_id = UserId(UUID(request.user_id)) if request.user_id else None

        result = await self.vote_service.revoke_vote(
            SubmissionId(request.submission_id), voter_id
        )
        await self.transaction.commit()

        return RevokeVoteResponse(
            outcome=result.outcome,
            success=result.succeeded,
            message=result.message,
        )
