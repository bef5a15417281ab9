"""Unit tests for the in-memory repositories."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from showcase.domain.error import (
    BusinessRuleViolationError,
    DuplicateSubmissionError,
    DuplicateVoteError,
)
from showcase.domain.model import Submission, Vote
from showcase.domain.value import SubmissionId, UserId, VoteId
from showcase.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemorySubmissionRepository,
    InMemoryVoteRepository,
)


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def submission_repo(database) -> InMemorySubmissionRepository:
    return InMemorySubmissionRepository(database)


@pytest.fixture
def vote_repo(database) -> InMemoryVoteRepository:
    return InMemoryVoteRepository(database)


def _submission(submission_id: str, owner_id: UserId | None = None, age_minutes: int = 0):
    created_at = datetime.now() - timedelta(minutes=age_minutes)
    return Submission(
        id=SubmissionId(submission_id),
        owner_id=owner_id or UserId(uuid4()),
        title=submission_id,
        created_at=created_at,
        updated_at=created_at,
    )


def _vote(submission_id: str, voter_id: UserId) -> Vote:
    return Vote(id=VoteId(uuid4()), submission_id=SubmissionId(submission_id), voter_id=voter_id)


class TestInMemorySubmissionRepository:
    @pytest.mark.asyncio
    async def test_duplicate_id_raises(self, submission_repo):
        await submission_repo.save(_submission("a"))

        with pytest.raises(DuplicateSubmissionError):
            await submission_repo.save(_submission("a"))

    @pytest.mark.asyncio
    async def test_second_submission_for_owner_raises(self, submission_repo):
        owner = UserId(uuid4())
        await submission_repo.save(_submission("a", owner))

        with pytest.raises(BusinessRuleViolationError):
            await submission_repo.save(_submission("b", owner))

    @pytest.mark.asyncio
    async def test_delete_requires_owner_and_cascades(self, submission_repo, vote_repo):
        owner = UserId(uuid4())
        voter = UserId(uuid4())
        await submission_repo.save(_submission("a", owner))
        await vote_repo.save(_vote("a", voter))

        assert await submission_repo.delete(SubmissionId("a"), UserId(uuid4())) is False
        assert await submission_repo.delete(SubmissionId("a"), owner) is True
        assert await submission_repo.find_by_id(SubmissionId("a")) is None
        assert await vote_repo.count_by_voter(voter) == 0


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_duplicate_pair_raises(self, vote_repo):
        voter = UserId(uuid4())
        await vote_repo.save(_vote("a", voter))

        with pytest.raises(DuplicateVoteError):
            await vote_repo.save(_vote("a", voter))

    @pytest.mark.asyncio
    async def test_counts_and_delete(self, vote_repo):
        voter, other = UserId(uuid4()), UserId(uuid4())
        await vote_repo.save(_vote("a", voter))
        await vote_repo.save(_vote("b", voter))
        await vote_repo.save(_vote("a", other))

        assert await vote_repo.count_by_voter(voter) == 2
        assert await vote_repo.count_by_submission(SubmissionId("a")) == 2
        assert await vote_repo.delete(SubmissionId("a"), voter) is True
        assert await vote_repo.delete(SubmissionId("a"), voter) is False
        assert await vote_repo.delete_by_submission(SubmissionId("a")) == 1
        assert await vote_repo.count_by_submission(SubmissionId("a")) == 0

    @pytest.mark.asyncio
    async def test_list_ranked_orders_by_total_then_age(self, submission_repo, vote_repo):
        await submission_repo.save(_submission("new", age_minutes=1))
        await submission_repo.save(_submission("old", age_minutes=10))
        await submission_repo.save(_submission("top", age_minutes=0))
        for _ in range(2):
            await vote_repo.save(_vote("top", UserId(uuid4())))
        await vote_repo.save(_vote("new", UserId(uuid4())))
        await vote_repo.save(_vote("old", UserId(uuid4())))

        ranked = await vote_repo.list_ranked(limit=10)

        assert [(r.submission.id, r.total_votes) for r in ranked] == [
            ("top", 2),
            ("old", 1),
            ("new", 1),
        ]
        assert len(await vote_repo.list_ranked(limit=1)) == 1
