"""Shared state for the in-memory repositories.

Plays the role the database session plays for the PostgreSQL repositories:
every repository built from the same InMemoryDatabase sees the same rows.
"""

import asyncio
from collections import defaultdict

from showcase.domain.model.submission import Submission
from showcase.domain.model.vote import Vote
from showcase.domain.value import SubmissionId, UserId


class InMemoryDatabase:
    """In-memory tables for submissions and votes."""

    def __init__(self) -> None:
        self.submissions: dict[SubmissionId, Submission] = {}
        # Keyed by the unique (submission_id, voter_id) pair
        self.votes: dict[tuple[SubmissionId, UserId], Vote] = {}
        self.voter_locks: defaultdict[UserId, asyncio.Lock] = defaultdict(asyncio.Lock)
        self.commits = 0
