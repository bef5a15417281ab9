"""PostgreSQL repository implementations."""

from showcase.persistence.repository.submission import PostgresSubmissionRepository
from showcase.persistence.repository.transaction import PostgresTransaction
from showcase.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresSubmissionRepository",
    "PostgresTransaction",
    "PostgresVoteRepository",
]
