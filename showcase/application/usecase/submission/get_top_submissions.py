"""Get top submissions use case."""

from datetime import datetime

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import VoteService


class GetTopSubmissionsRequest(BaseModel):
    """Get top submissions request.

    ``limit`` is the raw requested size. Missing, zero or non-numeric values
    mean the default size; anything else is clamped to the configured bounds.
    """

    limit: int | str | None = None


class RankedSubmissionItem(BaseModel):
    """Leaderboard row."""

    rank: int
    submission_id: str
    owner_id: str
    title: str
    total_votes: int
    created_at: datetime


class GetTopSubmissionsResponse(BaseModel):
    """Get top submissions response."""

    submissions: list[RankedSubmissionItem]


class GetTopSubmissionsUseCase(BaseUseCase):
    """Use case for the submissions leaderboard."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: GetTopSubmissionsRequest
    ) -> GetTopSubmissionsResponse:
        """Execute get top submissions flow.

        Returns:
            Submissions ordered by vote total, ties by earliest creation
        """
        ranked = await self.vote_service.top_submissions(request.limit)

        return GetTopSubmissionsResponse(
            submissions=[
                RankedSubmissionItem(
                    rank=position,
                    submission_id=row.submission.id,
                    owner_id=str(row.submission.owner_id),
                    title=row.submission.title,
                    total_votes=row.total_votes,
                    created_at=row.submission.created_at,
                )
                for position, row in enumerate(ranked, start=1)
            ]
        )
