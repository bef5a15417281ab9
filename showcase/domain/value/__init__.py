"""Domain value objects for Showcase."""

from showcase.domain.value.identifiers import SubmissionId, UserId, VoteId
from showcase.domain.value.types import (
    SUBMISSION_ID_PATTERN,
    CastOutcome,
    RevokeOutcome,
    SubmissionTitle,
    is_valid_submission_id,
    submission_id_from_url,
)

__all__ = [
    # Identifiers
    "SubmissionId",
    "UserId",
    "VoteId",
    # Types
    "CastOutcome",
    "RevokeOutcome",
    "SubmissionTitle",
    "SUBMISSION_ID_PATTERN",
    "is_valid_submission_id",
    "submission_id_from_url",
]
