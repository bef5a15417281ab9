"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .submission import InMemorySubmissionRepository
from .transaction import InMemoryTransaction
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemorySubmissionRepository",
    "InMemoryTransaction",
    "InMemoryVoteRepository",
]
