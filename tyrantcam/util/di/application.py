"""Application layer DI providers."""

from dishka import Scope, provide

from tyrantcam.application.usecase.auth import AdminLoginUseCase, GetCurrentAdminUseCase
from tyrantcam.application.usecase.submission import (
    CreateSubmissionUseCase,
    ListSubmissionsUseCase,
    PendingCountUseCase,
    ReviewSubmissionUseCase,
)
from tyrantcam.application.usecase.tyrant import (
    CreateTyrantUseCase,
    DeleteTyrantUseCase,
    GetTyrantUseCase,
    ListAllTyrantsUseCase,
    ListTyrantsUseCase,
    SetPublicationUseCase,
)
from tyrantcam.application.usecase.vote import (
    CastVoteUseCase,
    CheckVoteUseCase,
    RevokeVoteUseCase,
)
from tyrantcam.domain.service import (
    AdminService,
    JWTService,
    SubmissionService,
    TyrantService,
    VoteService,
)
from tyrantcam.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_admin_login_use_case(
        self, admin_service: AdminService, jwt_service: JWTService
    ) -> AdminLoginUseCase:
        """Provide admin login use case."""
        return AdminLoginUseCase(admin_service=admin_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_admin_use_case(
        self, jwt_service: JWTService, admin_service: AdminService
    ) -> GetCurrentAdminUseCase:
        """Provide get current admin use case."""
        return GetCurrentAdminUseCase(
            jwt_service=jwt_service, admin_service=admin_service
        )

    # Tyrant use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tyrants_use_case(
        self, tyrant_service: TyrantService, vote_service: VoteService
    ) -> ListTyrantsUseCase:
        """Provide list tyrants use case."""
        return ListTyrantsUseCase(
            tyrant_service=tyrant_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_tyrant_use_case(
        self, tyrant_service: TyrantService, vote_service: VoteService
    ) -> GetTyrantUseCase:
        """Provide get tyrant use case."""
        return GetTyrantUseCase(tyrant_service=tyrant_service, vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_create_tyrant_use_case(
        self, tyrant_service: TyrantService
    ) -> CreateTyrantUseCase:
        """Provide create tyrant use case."""
        return CreateTyrantUseCase(tyrant_service=tyrant_service)

    @provide(scope=Scope.REQUEST)
    def get_list_all_tyrants_use_case(
        self, tyrant_service: TyrantService
    ) -> ListAllTyrantsUseCase:
        """Provide admin list tyrants use case."""
        return ListAllTyrantsUseCase(tyrant_service=tyrant_service)

    @provide(scope=Scope.REQUEST)
    def get_set_publication_use_case(
        self, tyrant_service: TyrantService
    ) -> SetPublicationUseCase:
        """Provide set publication use case."""
        return SetPublicationUseCase(tyrant_service=tyrant_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_tyrant_use_case(
        self, tyrant_service: TyrantService
    ) -> DeleteTyrantUseCase:
        """Provide delete tyrant use case."""
        return DeleteTyrantUseCase(tyrant_service=tyrant_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, tyrant_service: TyrantService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, tyrant_service=tyrant_service)

    @provide(scope=Scope.REQUEST)
    def get_check_vote_use_case(self, vote_service: VoteService) -> CheckVoteUseCase:
        """Provide check vote use case."""
        return CheckVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_revoke_vote_use_case(self, vote_service: VoteService) -> RevokeVoteUseCase:
        """Provide revoke vote use case."""
        return RevokeVoteUseCase(vote_service=vote_service)

    # Submission use cases
    @provide(scope=Scope.REQUEST)
    def get_create_submission_use_case(
        self, submission_service: SubmissionService
    ) -> CreateSubmissionUseCase:
        """Provide create submission use case."""
        return CreateSubmissionUseCase(submission_service=submission_service)

    @provide(scope=Scope.REQUEST)
    def get_list_submissions_use_case(
        self, submission_service: SubmissionService
    ) -> ListSubmissionsUseCase:
        """Provide list submissions use case."""
        return ListSubmissionsUseCase(submission_service=submission_service)

    @provide(scope=Scope.REQUEST)
    def get_pending_count_use_case(
        self, submission_service: SubmissionService
    ) -> PendingCountUseCase:
        """Provide pending count use case."""
        return PendingCountUseCase(submission_service=submission_service)

    @provide(scope=Scope.REQUEST)
    def get_review_submission_use_case(
        self, submission_service: SubmissionService
    ) -> ReviewSubmissionUseCase:
        """Provide review submission use case."""
        return ReviewSubmissionUseCase(submission_service=submission_service)
