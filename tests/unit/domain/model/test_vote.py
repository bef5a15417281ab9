"""Unit tests for vote models."""

import pytest

from showcase.domain.model import VoteCastResult, VoteRevokeResult
from showcase.domain.value import CastOutcome, RevokeOutcome


class TestVoteCastResult:
    @pytest.mark.parametrize(
        ("outcome", "succeeded", "already_voted"),
        [
            (CastOutcome.RECORDED, True, False),
            (CastOutcome.ALREADY_VOTED, True, True),
            (CastOutcome.UNAUTHENTICATED, False, False),
            (CastOutcome.NOT_FOUND, False, False),
            (CastOutcome.SELF_VOTE, False, False),
            (CastOutcome.VOTE_LIMIT_REACHED, False, False),
        ],
    )
    def test_helpers(self, outcome, succeeded, already_voted):
        result = VoteCastResult(outcome=outcome, message="m")

        assert result.succeeded is succeeded
        assert result.already_voted is already_voted


class TestVoteRevokeResult:
    def test_not_voted_counts_as_success(self):
        assert VoteRevokeResult(outcome=RevokeOutcome.NOT_VOTED, message="m").succeeded
        assert VoteRevokeResult(outcome=RevokeOutcome.REVOKED, message="m").succeeded
        assert not VoteRevokeResult(
            outcome=RevokeOutcome.UNAUTHENTICATED, message="m"
        ).succeeded
