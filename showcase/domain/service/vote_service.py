"""Vote ledger domain service."""

from datetime import datetime
import math
from uuid import uuid4

import logfire

from showcase.config import VotingSettings
from showcase.domain.error import DuplicateVoteError
from showcase.domain.model.vote import (
    RankedSubmission,
    Vote,
    VoteCastResult,
    VoteRevokeResult,
    VoteState,
    VoteStats,
)
from showcase.domain.repository import VoteRepository
from showcase.domain.value import (
    CastOutcome,
    RevokeOutcome,
    SubmissionId,
    UserId,
    VoteId,
)

from .base import Service
from .submission_service import SubmissionService


class VoteService(Service):
    """Domain service for the vote ledger.

    Owns the rules that each (voter, submission) pair holds at most one
    vote, that voters cannot vote for their own submission, and that a
    voter's active votes are capped. Voter identity is always passed in
    explicitly; ``None`` means the caller is anonymous.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        submission_service: SubmissionService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            submission_service: Submission domain service (ownership lookup)
            voting_settings: Vote cap and leaderboard bounds
        """
        self.vote_repository = vote_repository
        self.submission_service = submission_service
        self.voting_settings = voting_settings

    async def get_vote_state(
        self, submission_id: SubmissionId, voter_id: UserId | None
    ) -> VoteState:
        """Get the vote total of a submission and whether the voter voted.

        Unknown submissions report zero votes rather than failing.

        Args:
            submission_id: Submission ID
            voter_id: Voter ID, or None for anonymous callers

        Returns:
            Current vote state
        """
        with logfire.span(
            "vote_service.get_vote_state",
            submission_id=submission_id,
            voter_id=str(voter_id) if voter_id else None,
        ):
            stats = await self.get_vote_stats(submission_id)

            has_voted = False
            if voter_id is not None:
                vote = await self.vote_repository.find(submission_id, voter_id)
                has_voted = vote is not None

            return VoteState(
                submission_id=submission_id,
                has_voted=has_voted,
                total_votes=stats.total_votes,
            )

    async def get_vote_stats(self, submission_id: SubmissionId) -> VoteStats:
        """Count the active votes on a submission.

        Args:
            submission_id: Submission ID

        Returns:
            Vote total, zero for unknown submissions
        """
        total_votes = await self.vote_repository.count_by_submission(submission_id)
        return VoteStats(submission_id=submission_id, total_votes=total_votes)

    async def cast_vote(
        self, submission_id: SubmissionId, voter_id: UserId | None
    ) -> VoteCastResult:
        """Cast a vote for a submission.

        Checks run in order: authentication, submission existence, self-vote,
        vote cap. Below the cap, a repeated cast for the same pair is not an
        error; it reports ``already_voted`` and changes nothing. At the cap
        every cast reports ``vote_limit_reached``.

        Args:
            submission_id: Submission ID
            voter_id: Voter ID, or None for anonymous callers

        Returns:
            Typed cast outcome

        Raises:
            InfrastructureError: If the store fails
        """
        with logfire.span(
            "vote_service.cast_vote",
            submission_id=submission_id,
            voter_id=str(voter_id) if voter_id else None,
        ):
            if voter_id is None:
                return VoteCastResult(
                    outcome=CastOutcome.UNAUTHENTICATED,
                    message="Authentication required to vote",
                )

            submission = await self.submission_service.get_submission(submission_id)
            if not submission:
                logfire.warn("Vote on non-existent submission", submission_id=submission_id)
                return VoteCastResult(
                    outcome=CastOutcome.NOT_FOUND,
                    message="Submission not found",
                )

            if submission.owner_id == voter_id:
                logfire.warn(
                    "Self-vote attempt",
                    submission_id=submission_id,
                    voter_id=str(voter_id),
                )
                return VoteCastResult(
                    outcome=CastOutcome.SELF_VOTE,
                    message="You cannot vote for your own submission.",
                )

            limit = self.voting_settings.vote_limit

            async with self.vote_repository.voter_lock(voter_id):
                # The cap counts active votes only, so a revoke frees a slot
                active_votes = await self.vote_repository.count_by_voter(voter_id)
                if active_votes >= limit:
                    logfire.warn(
                        "Vote limit reached",
                        voter_id=str(voter_id),
                        active_votes=active_votes,
                        vote_limit=limit,
                    )
                    return VoteCastResult(
                        outcome=CastOutcome.VOTE_LIMIT_REACHED,
                        message=f"Vote limit reached. You can only vote up to {limit} times.",
                    )

                vote = Vote(
                    id=VoteId(uuid4()),
                    submission_id=submission_id,
                    voter_id=voter_id,
                    created_at=datetime.now(),
                )

                # The unique constraint is the authoritative dedup path
                try:
                    await self.vote_repository.save(vote)
                except DuplicateVoteError:
                    return self._already_voted(submission_id, voter_id)

            logfire.info(
                "Vote recorded", submission_id=submission_id, voter_id=str(voter_id)
            )
            return VoteCastResult(
                outcome=CastOutcome.RECORDED,
                message="Vote recorded",
            )

    async def revoke_vote(
        self, submission_id: SubmissionId, voter_id: UserId | None
    ) -> VoteRevokeResult:
        """Revoke a voter's vote on a submission.

        Revoking a vote that does not exist succeeds with ``not_voted``.

        Args:
            submission_id: Submission ID
            voter_id: Voter ID, or None for anonymous callers

        Returns:
            Typed revoke outcome

        Raises:
            InfrastructureError: If the store fails
        """
        with logfire.span(
            "vote_service.revoke_vote",
            submission_id=submission_id,
            voter_id=str(voter_id) if voter_id else None,
        ):
            if voter_id is None:
                return VoteRevokeResult(
                    outcome=RevokeOutcome.UNAUTHENTICATED,
                    message="Authentication required to remove vote",
                )

            deleted = await self.vote_repository.delete(submission_id, voter_id)

            if deleted:
                logfire.info(
                    "Vote revoked", submission_id=submission_id, voter_id=str(voter_id)
                )
                return VoteRevokeResult(
                    outcome=RevokeOutcome.REVOKED,
                    message="Vote removed successfully",
                )

            logfire.info(
                "No vote to revoke", submission_id=submission_id, voter_id=str(voter_id)
            )
            return VoteRevokeResult(
                outcome=RevokeOutcome.NOT_VOTED,
                message="No vote found to remove",
            )

    async def top_submissions(
        self, limit: int | str | None = None
    ) -> list[RankedSubmission]:
        """Rank submissions by vote total.

        Ties are broken by earlier creation time. Each call computes a fresh
        snapshot.

        Args:
            limit: Maximum rows, clamped to [1, top_max_limit]; missing, zero
                or non-numeric values mean top_default_limit

        Returns:
            Ranked submissions, highest total first
        """
        capped = self.clamp_limit(limit)
        with logfire.span("vote_service.top_submissions", limit=capped):
            return await self.vote_repository.list_ranked(capped)

    def clamp_limit(self, limit: int | str | None) -> int:
        """Clamp a requested leaderboard size to the configured bounds.

        The size arrives as raw query text. Missing, zero and non-numeric
        values fall back to top_default_limit; everything else is clamped to
        [1, top_max_limit] and truncated to a whole number.
        """
        try:
            requested = float(limit) if limit is not None else 0.0
        except (TypeError, ValueError):
            requested = 0.0
        if not requested or math.isnan(requested):
            requested = self.voting_settings.top_default_limit
        return int(max(1, min(self.voting_settings.top_max_limit, requested)))

    def _already_voted(
        self, submission_id: SubmissionId, voter_id: UserId
    ) -> VoteCastResult:
        logfire.info(
            "Duplicate vote attempt",
            submission_id=submission_id,
            voter_id=str(voter_id),
        )
        return VoteCastResult(
            outcome=CastOutcome.ALREADY_VOTED,
            message="Already voted on this submission",
        )
