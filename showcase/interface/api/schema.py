"""Wire models for the HTTP API.

Bodies are camelCase on the wire; Python attributes stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VoteStateBody(CamelModel):
    """Vote state of a submission as seen by the caller."""

    submission_id: str
    has_voted: bool
    total_votes: int


class CastVoteBody(CamelModel):
    """Successful cast."""

    already_voted: bool


class RevokeVoteBody(CamelModel):
    """Successful revoke."""

    ok: bool = True


class SubmissionBody(CamelModel):
    """Submission details."""

    id: str
    owner_id: str
    title: str
    created_at: datetime
    updated_at: datetime


class OwnSubmissionBody(CamelModel):
    """The caller's submission, null if they have not submitted."""

    submission: SubmissionBody | None


class RankedSubmissionBody(CamelModel):
    """Leaderboard row."""

    rank: int
    id: str
    owner_id: str
    title: str
    total_votes: int
    created_at: datetime


class TopSubmissionsBody(CamelModel):
    """Leaderboard."""

    submissions: list[RankedSubmissionBody]


class CreateSubmissionBody(CamelModel):
    """Create submission request body.

    Either ``submissionId`` or the showcase ``url`` it is taken from.
    """

    submission_id: str | None = None
    url: str | None = None
    title: str


class DeleteSubmissionBody(CamelModel):
    """Successful delete."""

    success: bool
