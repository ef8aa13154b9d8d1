"""Domain layer DI providers."""

from dishka import Scope, provide

from tyrantcam.config import AuthSettings
from tyrantcam.domain.repository import (
    AdminUserRepository,
    SubmissionRepository,
    TyrantRepository,
    VoteRepository,
)
from tyrantcam.domain.service import (
    AdminService,
    JWTService,
    LoginRateLimiter,
    SubmissionService,
    TyrantService,
    VoteService,
)
from tyrantcam.util.di.base import ProviderBase


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
    def get_tyrant_service(self, tyrant_repository: TyrantRepository) -> TyrantService:
        """Provide tyrant domain service."""
        return TyrantService(tyrant_repository=tyrant_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        tyrant_repository: TyrantRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            tyrant_repository=tyrant_repository,
        )

    @provide
    def get_submission_service(
        self,
        submission_repository: SubmissionRepository,
        tyrant_service: TyrantService,
    ) -> SubmissionService:
        """Provide submission domain service."""
        return SubmissionService(
            submission_repository=submission_repository,
            tyrant_service=tyrant_service,
        )

    @provide
    def get_admin_service(
        self,
        admin_repository: AdminUserRepository,
        rate_limiter: LoginRateLimiter,
    ) -> AdminService:
        """Provide admin account domain service."""
        return AdminService(admin_repository=admin_repository, rate_limiter=rate_limiter)
