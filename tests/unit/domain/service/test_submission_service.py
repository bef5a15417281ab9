"""Unit tests for SubmissionService."""

import pytest
from pydantic import ValidationError

from showcase.domain.error import (
    BusinessRuleViolationError,
    DuplicateSubmissionError,
    NotAuthorizedError,
    NotFoundError,
)
from showcase.domain.repository import VoteRepository
from showcase.domain.service import SubmissionService, VoteService
from showcase.domain.value import SubmissionId
from tests.factories import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateSubmission:
    """Tests for create_submission."""

    @pytest.mark.asyncio
    async def test_create_submission_strips_title(self, unit_env):
        """Created submission is retrievable with a trimmed title."""
        # Arrange
        submission_service = await unit_env.get(SubmissionService)
        owner = new_user_id()

        # Act
        created = await submission_service.create_submission(
            SubmissionId("KKPQLmJ"), owner, "  My pen  "
        )

        # Assert
        assert created.title == "My pen"
        assert created.owner_id == owner
        assert await submission_service.get_submission(SubmissionId("KKPQLmJ")) == created
        assert await submission_service.get_submission_by_owner(owner) == created

    @pytest.mark.asyncio
    async def test_second_submission_from_same_owner_is_rejected(self, unit_env):
        """Each owner may register only one submission."""
        # Arrange
        submission_service = await unit_env.get(SubmissionService)
        owner = new_user_id()
        await submission_service.create_submission(SubmissionId("first"), owner, "One")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already submitted"):
            await submission_service.create_submission(
                SubmissionId("second"), owner, "Two"
            )

    @pytest.mark.asyncio
    async def test_taken_identifier_is_rejected(self, unit_env):
        """Two owners cannot register the same identifier."""
        # Arrange
        submission_service = await unit_env.get(SubmissionService)
        await submission_service.create_submission(
            SubmissionId("shared"), new_user_id(), "Mine"
        )

        # Act & Assert
        with pytest.raises(DuplicateSubmissionError):
            await submission_service.create_submission(
                SubmissionId("shared"), new_user_id(), "Also mine"
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   ", "x" * 201])
    async def test_invalid_title_is_rejected(self, unit_env, title):
        submission_service = await unit_env.get(SubmissionService)

        with pytest.raises(ValidationError):
            await submission_service.create_submission(
                SubmissionId("abc"), new_user_id(), title
            )

    @pytest.mark.asyncio
    async def test_get_missing_submission_returns_none(self, unit_env):
        submission_service = await unit_env.get(SubmissionService)

        assert await submission_service.get_submission(SubmissionId("missing")) is None
        assert await submission_service.get_submission_by_owner(new_user_id()) is None


class TestDeleteOwnSubmission:
    """Tests for delete_own_submission."""

    @pytest.mark.asyncio
    async def test_owner_delete_removes_submission_and_votes(self, unit_env):
        """Deleting a submission deletes its votes and frees voters' slots."""
        # Arrange
        submission_service = await unit_env.get(SubmissionService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        owner, voter = new_user_id(), new_user_id()
        await submission_service.create_submission(SubmissionId("S1"), owner, "Pen")
        await vote_service.cast_vote(SubmissionId("S1"), voter)

        # Act
        await submission_service.delete_own_submission(SubmissionId("S1"), owner)

        # Assert
        assert await submission_service.get_submission(SubmissionId("S1")) is None
        assert await vote_repo.count_by_submission(SubmissionId("S1")) == 0
        assert await vote_repo.count_by_voter(voter) == 0

    @pytest.mark.asyncio
    async def test_owner_can_submit_again_after_delete(self, unit_env):
        submission_service = await unit_env.get(SubmissionService)
        owner = new_user_id()
        await submission_service.create_submission(SubmissionId("old"), owner, "Old")
        await submission_service.delete_own_submission(SubmissionId("old"), owner)

        created = await submission_service.create_submission(
            SubmissionId("new"), owner, "New"
        )

        assert created.id == "new"

    @pytest.mark.asyncio
    async def test_delete_by_other_user_is_not_authorized(self, unit_env):
        """Only the owner may delete a submission."""
        # Arrange
        submission_service = await unit_env.get(SubmissionService)
        await submission_service.create_submission(
            SubmissionId("S1"), new_user_id(), "Pen"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await submission_service.delete_own_submission(
                SubmissionId("S1"), new_user_id()
            )
        assert await submission_service.get_submission(SubmissionId("S1")) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_submission_is_not_found(self, unit_env):
        submission_service = await unit_env.get(SubmissionService)

        with pytest.raises(NotFoundError):
            await submission_service.delete_own_submission(
                SubmissionId("missing"), new_user_id()
            )
