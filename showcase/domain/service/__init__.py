"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .submission_service import SubmissionService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "Service",
    "SubmissionService",
    "VoteService",
]
