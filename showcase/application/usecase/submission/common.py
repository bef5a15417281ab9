"""Shared submission response model."""

from datetime import datetime

from pydantic import BaseModel

from showcase.domain.model.submission import Submission


class SubmissionResponse(BaseModel):
    """Submission details."""

    submission_id: str
    owner_id: str
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_submission(cls, submission: Submission) -> "SubmissionResponse":
        return cls(
            submission_id=submission.id,
            owner_id=str(submission.owner_id),
            title=submission.title,
            created_at=submission.created_at,
            updated_at=submission.updated_at,
        )
