"""Submission entity.

A submission is a single externally hosted design showcase entry that a user
registers for voting. Each user owns at most one.
"""

from datetime import datetime

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import SubmissionId, UserId


class Submission(DomainModel):
    """Submission entity.

    Business rules:
    - Identifier comes from the external showcase entry and is globally unique
    - One submission per owner (enforced by SubmissionService)
    - Immutable once created; only its owner may delete it
    """

    id: SubmissionId = Field(pattern=r"^[A-Za-z0-9_-]{1,64}$")
    owner_id: UserId
    title: str = Field(min_length=1, max_length=200)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
