"""Domain model entities for Showcase."""

from showcase.domain.model.submission import Submission
from showcase.domain.model.vote import (
    RankedSubmission,
    Vote,
    VoteCastResult,
    VoteRevokeResult,
    VoteState,
    VoteStats,
)

__all__ = [
    "Submission",
    "Vote",
    "VoteStats",
    "VoteState",
    "RankedSubmission",
    "VoteCastResult",
    "VoteRevokeResult",
]
