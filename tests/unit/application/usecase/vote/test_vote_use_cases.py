"""Unit tests for vote use cases."""

import pytest

from showcase.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateUseCase,
    RevokeVoteRequest,
    RevokeVoteUseCase,
)
from showcase.domain.error import InfrastructureError
from showcase.domain.repository import SubmissionRepository, Transaction
from showcase.domain.service import VoteService
from showcase.domain.value import CastOutcome, RevokeOutcome
from showcase.persistence.repository.inmemory import InMemoryDatabase
from tests.factories import make_submission, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingTransaction(Transaction):
    """Transaction whose commit is rejected by the store."""

    async def commit(self) -> None:
        raise InfrastructureError("commit")


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_cast_then_repeat(self, unit_env):
        """First cast records, second reports already voted."""
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        submission_repo = await unit_env.get(SubmissionRepository)
        await make_submission(submission_repo, "pen1")
        request = CastVoteRequest(submission_id="pen1", user_id=str(new_user_id()))

        # Act
        first = await cast_vote.execute(request)
        second = await cast_vote.execute(request)

        # Assert
        assert first.outcome == CastOutcome.RECORDED
        assert first.already_voted is False
        assert first.succeeded is True
        assert second.outcome == CastOutcome.ALREADY_VOTED
        assert second.already_voted is True

    @pytest.mark.asyncio
    async def test_anonymous_request(self, unit_env):
        cast_vote = await unit_env.get(CastVoteUseCase)

        response = await cast_vote.execute(CastVoteRequest(submission_id="pen1"))

        assert response.outcome == CastOutcome.UNAUTHENTICATED
        assert response.succeeded is False


class TestGetVoteStateUseCase:
    @pytest.mark.asyncio
    async def test_state_after_cast(self, unit_env):
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        get_state = await unit_env.get(GetVoteStateUseCase)
        submission_repo = await unit_env.get(SubmissionRepository)
        await make_submission(submission_repo, "pen1")
        voter = str(new_user_id())
        await cast_vote.execute(CastVoteRequest(submission_id="pen1", user_id=voter))

        # Act
        mine = await get_state.execute(
            GetVoteStateRequest(submission_id="pen1", user_id=voter)
        )
        anonymous = await get_state.execute(GetVoteStateRequest(submission_id="pen1"))

        # Assert
        assert mine.has_voted is True
        assert mine.total_votes == 1
        assert anonymous.has_voted is False
        assert anonymous.total_votes == 1


class TestRevokeVoteUseCase:
    @pytest.mark.asyncio
    async def test_revoke_existing_and_missing(self, unit_env):
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        revoke_vote = await unit_env.get(RevokeVoteUseCase)
        submission_repo = await unit_env.get(SubmissionRepository)
        await make_submission(submission_repo, "pen1")
        voter = str(new_user_id())
        await cast_vote.execute(CastVoteRequest(submission_id="pen1", user_id=voter))
        request = RevokeVoteRequest(submission_id="pen1", user_id=voter)

        # Act
        first = await revoke_vote.execute(request)
        second = await revoke_vote.execute(request)

        # Assert
        assert first.outcome == RevokeOutcome.REVOKED
        assert first.success is True
        assert first.message == "Vote removed successfully"
        assert second.outcome == RevokeOutcome.NOT_VOTED
        assert second.success is True
        assert second.message == "No vote found to remove"


class TestWriteUseCasesCommit:
    """Write use cases commit before returning their result."""

    @pytest.mark.asyncio
    async def test_cast_and_revoke_commit(self, unit_env):
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        revoke_vote = await unit_env.get(RevokeVoteUseCase)
        submission_repo = await unit_env.get(SubmissionRepository)
        database = await unit_env.get(InMemoryDatabase)
        await make_submission(submission_repo, "pen1")
        voter = str(new_user_id())

        # Act
        await cast_vote.execute(CastVoteRequest(submission_id="pen1", user_id=voter))
        after_cast = database.commits
        await revoke_vote.execute(RevokeVoteRequest(submission_id="pen1", user_id=voter))

        # Assert
        assert after_cast == 1
        assert database.commits == 2

    @pytest.mark.asyncio
    async def test_failed_commit_raises_instead_of_reporting_success(self, unit_env):
        """A rejected commit surfaces as InfrastructureError, not a recorded vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        submission_repo = await unit_env.get(SubmissionRepository)
        await make_submission(submission_repo, "pen1")
        cast_vote = CastVoteUseCase(
            vote_service=vote_service, transaction=FailingTransaction()
        )

        # Act / Assert
        with pytest.raises(InfrastructureError):
            await cast_vote.execute(
                CastVoteRequest(submission_id="pen1", user_id=str(new_user_id()))
            )

    @pytest.mark.asyncio
    async def test_failed_commit_on_revoke_raises(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        revoke_vote = RevokeVoteUseCase(
            vote_service=vote_service, transaction=FailingTransaction()
        )

        # Act / Assert
        with pytest.raises(InfrastructureError):
            await revoke_vote.execute(
                RevokeVoteRequest(submission_id="pen1", user_id=str(new_user_id()))
            )
