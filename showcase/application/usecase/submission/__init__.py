"""Submission use cases."""

from .common import SubmissionResponse
from .create_submission import CreateSubmissionRequest, CreateSubmissionUseCase
from .delete_submission import (
    DeleteSubmissionRequest,
    DeleteSubmissionResponse,
    DeleteSubmissionUseCase,
)
from .get_own_submission import (
    GetOwnSubmissionRequest,
    GetOwnSubmissionResponse,
    GetOwnSubmissionUseCase,
)
from .get_submission import GetSubmissionRequest, GetSubmissionUseCase
from .get_top_submissions import (
    GetTopSubmissionsRequest,
    GetTopSubmissionsResponse,
    GetTopSubmissionsUseCase,
    RankedSubmissionItem,
)

__all__ = [
    "SubmissionResponse",
    "CreateSubmissionRequest",
    "CreateSubmissionUseCase",
    "DeleteSubmissionRequest",
    "DeleteSubmissionResponse",
    "DeleteSubmissionUseCase",
    "GetOwnSubmissionRequest",
    "GetOwnSubmissionResponse",
    "GetOwnSubmissionUseCase",
    "GetSubmissionRequest",
    "GetSubmissionUseCase",
    "GetTopSubmissionsRequest",
    "GetTopSubmissionsResponse",
    "GetTopSubmissionsUseCase",
    "RankedSubmissionItem",
]
