"""Unit tests for submission use cases."""

import pytest
from pydantic import ValidationError

from showcase.application.usecase.submission import (
    CreateSubmissionRequest,
    CreateSubmissionUseCase,
    DeleteSubmissionRequest,
    DeleteSubmissionUseCase,
    GetOwnSubmissionRequest,
    GetOwnSubmissionUseCase,
    GetSubmissionRequest,
    GetSubmissionUseCase,
    GetTopSubmissionsRequest,
    GetTopSubmissionsUseCase,
)
from showcase.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from showcase.domain.error import NotAuthorizedError
from tests.factories import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateSubmissionRequest:
    def test_requires_an_identifier(self):
        with pytest.raises(ValidationError, match="Either submission_id or url"):
            CreateSubmissionRequest(title="Pen", user_id=str(new_user_id()))

    def test_rejects_both_identifiers(self):
        with pytest.raises(ValidationError, match="not both"):
            CreateSubmissionRequest(
                submission_id="abc",
                url="https://codepen.io/a/pen/abc",
                title="Pen",
                user_id=str(new_user_id()),
            )

    def test_rejects_malformed_id(self):
        with pytest.raises(ValidationError, match="Invalid submission ID"):
            CreateSubmissionRequest(
                submission_id="a b", title="Pen", user_id=str(new_user_id())
            )


class TestCreateSubmissionUseCase:
    @pytest.mark.asyncio
    async def test_create_from_url(self, unit_env):
        """Identifier is derived from the showcase URL."""
        # Arrange
        create_submission = await unit_env.get(CreateSubmissionUseCase)
        owner = str(new_user_id())

        # Act
        response = await create_submission.execute(
            CreateSubmissionRequest(
                url="https://codepen.io/team/codepen/pen/KKPQLmJ",
                title=" Neon ",
                user_id=owner,
            )
        )

        # Assert
        assert response.submission_id == "KKPQLmJ"
        assert response.owner_id == owner
        assert response.title == "Neon"

    @pytest.mark.asyncio
    async def test_invalid_url_raises_value_error(self, unit_env):
        create_submission = await unit_env.get(CreateSubmissionUseCase)

        with pytest.raises(ValueError):
            await create_submission.execute(
                CreateSubmissionRequest(
                    url="https://codepen.io/", title="Pen", user_id=str(new_user_id())
                )
            )


class TestGetSubmissionUseCases:
    @pytest.mark.asyncio
    async def test_get_by_id_and_owner(self, unit_env):
        # Arrange
        create_submission = await unit_env.get(CreateSubmissionUseCase)
        get_submission = await unit_env.get(GetSubmissionUseCase)
        get_own = await unit_env.get(GetOwnSubmissionUseCase)
        owner = str(new_user_id())
        await create_submission.execute(
            CreateSubmissionRequest(submission_id="abc", title="Pen", user_id=owner)
        )

        # Act
        by_id = await get_submission.execute(GetSubmissionRequest(submission_id="abc"))
        missing = await get_submission.execute(GetSubmissionRequest(submission_id="zzz"))
        own = await get_own.execute(GetOwnSubmissionRequest(user_id=owner))
        none = await get_own.execute(GetOwnSubmissionRequest(user_id=str(new_user_id())))

        # Assert
        assert by_id is not None
        assert by_id.title == "Pen"
        assert missing is None
        assert own.submission is not None
        assert own.submission.submission_id == "abc"
        assert none.submission is None


class TestDeleteSubmissionUseCase:
    @pytest.mark.asyncio
    async def test_only_owner_can_delete(self, unit_env):
        # Arrange
        create_submission = await unit_env.get(CreateSubmissionUseCase)
        delete_submission = await unit_env.get(DeleteSubmissionUseCase)
        owner = str(new_user_id())
        await create_submission.execute(
            CreateSubmissionRequest(submission_id="abc", title="Pen", user_id=owner)
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete_submission.execute(
                DeleteSubmissionRequest(submission_id="abc", user_id=str(new_user_id()))
            )

        response = await delete_submission.execute(
            DeleteSubmissionRequest(submission_id="abc", user_id=owner)
        )
        assert response.success is True


class TestGetTopSubmissionsUseCase:
    @pytest.mark.asyncio
    async def test_ranks_are_one_based(self, unit_env):
        # Arrange
        create_submission = await unit_env.get(CreateSubmissionUseCase)
        cast_vote = await unit_env.get(CastVoteUseCase)
        get_top = await unit_env.get(GetTopSubmissionsUseCase)
        for submission_id in ("first", "second"):
            await create_submission.execute(
                CreateSubmissionRequest(
                    submission_id=submission_id,
                    title=submission_id,
                    user_id=str(new_user_id()),
                )
            )
        await cast_vote.execute(
            CastVoteRequest(submission_id="second", user_id=str(new_user_id()))
        )

        # Act
        top = await get_top.execute(GetTopSubmissionsRequest())
        limited = await get_top.execute(GetTopSubmissionsRequest(limit="1"))
        defaulted = await get_top.execute(GetTopSubmissionsRequest(limit=0))

        # Assert
        assert [(row.rank, row.submission_id, row.total_votes) for row in top.submissions] == [
            (1, "second", 1),
            (2, "first", 0),
        ]
        assert len(limited.submissions) == 1
        assert len(defaulted.submissions) == 2
