"""List submissions use case (admin)."""

from typing import Optional

from pydantic import BaseModel, Field

from tyrantcam.application.usecase.base import BaseUseCase, require_admin
from tyrantcam.domain.service import SubmissionService
from tyrantcam.domain.value import SubmissionStatus

from .common import SubmissionResponse


class ListSubmissionsRequest(BaseModel):
    """List submissions request."""

    admin_id: Optional[str] = None
    status: Optional[SubmissionStatus] = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListSubmissionsResponse(BaseModel):
    """List submissions response."""

    submissions: list[SubmissionResponse]
    limit: int
    offset: int


class PendingCountRequest(BaseModel):
    """Pending count request."""

    admin_id: Optional[str] = None


class PendingCountResponse(BaseModel):
    """Pending count response."""

    pending: int


class ListSubmissionsUseCase(BaseUseCase):
    """Use case for browsing the moderation queue."""

    def __init__(self, submission_service: SubmissionService) -> None:
        self.submission_service = submission_service

    async def execute(self, request: ListSubmissionsRequest) -> ListSubmissionsResponse:
        """List submissions, newest first.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
        """
        require_admin(request.admin_id, "view submissions")
        submissions = await self.submission_service.list_submissions(
            status=request.status, limit=request.limit, offset=request.offset
        )
        return ListSubmissionsResponse(
            submissions=[SubmissionResponse.from_submission(s) for s in submissions],
            limit=request.limit,
            offset=request.offset,
        )


class PendingCountUseCase(BaseUseCase):
    """Use case for the pending-review badge in the admin dashboard."""

    def __init__(self, submission_service: SubmissionService) -> None:
        self.submission_service = submission_service

    async def execute(self, request: PendingCountRequest) -> PendingCountResponse:
        require_admin(request.admin_id, "view submissions")
        return PendingCountResponse(
            pending=await self.submission_service.pending_count()
        )
