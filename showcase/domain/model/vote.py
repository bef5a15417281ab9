"""Vote entity and vote ledger projections.

A vote is a directed, de-duplicated endorsement from one voter to one
submission. Votes are created by a cast and destroyed by a revoke; they are
never mutated in place.
"""

from datetime import datetime

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.model.submission import Submission
from showcase.domain.value import (
    CastOutcome,
    RevokeOutcome,
    SubmissionId,
    UserId,
    VoteId,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (submission, voter) pair (unique constraint)
    - A voter may not vote for their own submission
    - A voter's active votes are capped (see VotingSettings.vote_limit)
    """

    id: VoteId
    submission_id: SubmissionId
    voter_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class VoteStats(DomainModel):
    """Aggregate count of active votes on a submission.

    Always recomputed from the vote store, never stored independently.
    """

    submission_id: SubmissionId
    total_votes: int = Field(default=0, ge=0)


class VoteState(DomainModel):
    """A voter's view of a submission's votes."""

    submission_id: SubmissionId
    has_voted: bool = False
    total_votes: int = Field(default=0, ge=0)


class RankedSubmission(DomainModel):
    """Leaderboard row: a submission with its current vote total."""

    submission: Submission
    total_votes: int = Field(ge=0)


class VoteCastResult(DomainModel):
    """Typed outcome of a cast attempt."""

    outcome: CastOutcome
    message: str

    @property
    def succeeded(self) -> bool:
        """Whether the voter now holds a vote on the submission."""
        return self.outcome in (CastOutcome.RECORDED, CastOutcome.ALREADY_VOTED)

    @property
    def already_voted(self) -> bool:
        return self.outcome == CastOutcome.ALREADY_VOTED


class VoteRevokeResult(DomainModel):
    """Typed outcome of a revoke attempt."""

    outcome: RevokeOutcome
    message: str

    @property
    def succeeded(self) -> bool:
        """Revoking a vote that does not exist still counts as success."""
        return self.outcome in (RevokeOutcome.REVOKED, RevokeOutcome.NOT_VOTED)
