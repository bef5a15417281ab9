"""Application layer DI providers."""

from dishka import Scope, provide

from showcase.util.di.base import ProviderBase
from showcase.application.usecase.submission import (
    CreateSubmissionUseCase,
    DeleteSubmissionUseCase,
    GetOwnSubmissionUseCase,
    GetSubmissionUseCase,
    GetTopSubmissionsUseCase,
)
from showcase.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteStateUseCase,
    RevokeVoteUseCase,
)
from showcase.domain.repository import Transaction
from showcase.domain.service import SubmissionService, VoteService


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_state_use_case(self, vote_service: VoteService) -> GetVoteStateUseCase:
        """Provide get vote state use case."""
        return GetVoteStateUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, transaction: Transaction
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, transaction=transaction)

    @provide(scope=Scope.REQUEST)
    def get_revoke_vote_use_case(
        self, vote_service: VoteService, transaction: Transaction
    ) -> RevokeVoteUseCase:
        """Provide revoke vote use case."""
        return RevokeVoteUseCase(vote_service=vote_service, transaction=transaction)

    # Submission use cases
    @provide(scope=Scope.REQUEST)
    def get_create_submission_use_case(
        self, submission_service: SubmissionService, transaction: Transaction
    ) -> CreateSubmissionUseCase:
        """Provide create submission use case."""
        return CreateSubmissionUseCase(
            submission_service=submission_service, transaction=transaction
        )

    @provide(scope=Scope.REQUEST)
    def get_get_submission_use_case(
        self, submission_service: SubmissionService
    ) -> GetSubmissionUseCase:
        """Provide get submission use case."""
        return GetSubmissionUseCase(submission_service=submission_service)

    @provide(scope=Scope.REQUEST)
    def get_get_own_submission_use_case(
        self, submission_service: SubmissionService
    ) -> GetOwnSubmissionUseCase:
        """Provide get own submission use case."""
        return GetOwnSubmissionUseCase(submission_service=submission_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_submission_use_case(
        self, submission_service: SubmissionService, transaction: Transaction
    ) -> DeleteSubmissionUseCase:
        """Provide delete submission use case."""
        return DeleteSubmissionUseCase(
            submission_service=submission_service, transaction=transaction
        )

    @provide(scope=Scope.REQUEST)
    def get_top_submissions_use_case(
        self, vote_service: VoteService
    ) -> GetTopSubmissionsUseCase:
        """Provide leaderboard use case."""
        return GetTopSubmissionsUseCase(vote_service=vote_service)
