"""Domain layer DI providers."""

from dishka import Scope, provide

from showcase.config import AuthSettings, VotingSettings
from showcase.domain.repository import SubmissionRepository, VoteRepository
from showcase.domain.service import JWTService, SubmissionService, VoteService
from showcase.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_submission_service(
        self,
        submission_repository: SubmissionRepository,
        vote_repository: VoteRepository,
    ) -> SubmissionService:
        """Provide submission domain service."""
        return SubmissionService(
            submission_repository=submission_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        submission_service: SubmissionService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            submission_service=submission_service,
            voting_settings=voting_settings,
        )
