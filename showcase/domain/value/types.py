"""Domain value objects for Showcase.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum
from urllib.parse import urlparse

from pydantic import field_validator

from showcase.domain.value.common import RootValueObject
from showcase.domain.value.identifiers import SubmissionId

SUBMISSION_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"


class CastOutcome(str, Enum):
    """Result of a cast attempt.

    Business rule violations are outcomes, not exceptions, so callers can
    tell them apart without parsing messages.
    """

    RECORDED = "recorded"
    ALREADY_VOTED = "already_voted"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    SELF_VOTE = "self_vote"
    VOTE_LIMIT_REACHED = "vote_limit_reached"


class RevokeOutcome(str, Enum):
    """Result of a revoke attempt."""

    REVOKED = "revoked"
    NOT_VOTED = "not_voted"
    UNAUTHENTICATED = "unauthenticated"


class SubmissionTitle(RootValueObject[str]):
    """Display title of a submission.

    Surrounding whitespace is stripped; must be 1-200 characters afterwards.
    """

    @field_validator("root")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Strip and validate title length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 200:
            raise ValueError("Title must be 1-200 characters")
        return v


def is_valid_submission_id(value: str) -> bool:
    """Check whether a string is a well-formed submission identifier."""
    return re.match(SUBMISSION_ID_PATTERN, value) is not None


def submission_id_from_url(url: str) -> SubmissionId:
    """Derive a submission identifier from a showcase URL.

    The identifier is the last non-empty path segment, e.g.
    ``https://codepen.io/team/codepen/pen/KKPQLmJ`` -> ``KKPQLmJ``.

    Raises:
        ValueError: If the URL has no usable path segment
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Not a valid showcase URL: {url}")

    segments = [s for s in parsed.path.split("/") if s]
    if not segments or not is_valid_submission_id(segments[-1]):
        raise ValueError(f"Could not extract a submission ID from URL: {url}")

    return SubmissionId(segments[-1])
