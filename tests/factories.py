"""Test data helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from showcase.config import Settings
from showcase.domain.model.submission import Submission
from showcase.domain.repository import SubmissionRepository
from showcase.domain.value import SubmissionId, UserId
from showcase.util.jwt import create_token


def new_user_id() -> UserId:
    return UserId(uuid4())


async def make_submission(
    submission_repository: SubmissionRepository,
    submission_id: str,
    owner_id: UserId | None = None,
    title: str | None = None,
    age: timedelta = timedelta(0),
) -> Submission:
    """Save a submission for tests.

    Args:
        submission_repository: Repository to save into
        submission_id: Submission ID
        owner_id: Owner (a fresh user when omitted)
        title: Title (derived from the ID when omitted)
        age: How long ago the submission was created

    Returns:
        Saved submission
    """
    created_at = datetime.now() - age
    submission = Submission(
        id=SubmissionId(submission_id),
        owner_id=owner_id or new_user_id(),
        title=title or f"Submission {submission_id}",
        created_at=created_at,
        updated_at=created_at,
    )
    return await submission_repository.save(submission)


def auth_cookie(user_id: UserId, email: str | None = None) -> dict[str, str]:
    """Cookies carrying a valid token for the user, signed with the configured secret."""
    return {"auth_token": create_token(str(user_id), Settings().auth, email=email)}
