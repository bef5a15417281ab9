"""Repository interfaces for Showcase domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from showcase.domain.repository.submission import SubmissionRepository
from showcase.domain.repository.transaction import Transaction
from showcase.domain.repository.vote import VoteRepository

__all__ = [
    "SubmissionRepository",
    "Transaction",
    "VoteRepository",
]
