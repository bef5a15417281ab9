"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from showcase.domain.model import RankedSubmission, Submission, Vote
from showcase.domain.value import SubmissionId, UserId, VoteId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_submission(row: Dict[str, Any]) -> Submission:
    """Convert database row to Submission domain model.

    Args:
        row: Database row as dict

    Returns:
        Submission domain model
    """
    return Submission(
        id=SubmissionId(row["id"]),
        owner_id=UserId(_as_uuid(row["owner_id"])),
        title=row["title"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def submission_to_dict(submission: Submission) -> Dict[str, Any]:
    """Convert Submission domain model to database dict."""
    return submission.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_as_uuid(row["id"])),
        submission_id=SubmissionId(row["submission_id"]),
        voter_id=UserId(_as_uuid(row["voter_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_ranked_submission(row: Dict[str, Any]) -> RankedSubmission:
    """Convert a leaderboard row (submission columns + total_votes)."""
    return RankedSubmission(
        submission=row_to_submission(row),
        total_votes=row["total_votes"],
    )
