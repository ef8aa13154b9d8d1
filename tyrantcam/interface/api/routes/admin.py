"""Admin routes.

Every route except login/logout/me requires a valid admin token in the
session cookie.
"""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, Response, status
from pydantic import BaseModel

from tyrantcam.application.usecase.auth import (
    AdminLoginRequest,
    AdminLoginUseCase,
    GetCurrentAdminRequest,
    GetCurrentAdminResponse,
    GetCurrentAdminUseCase,
)
from tyrantcam.application.usecase.submission import (
    ListSubmissionsRequest,
    ListSubmissionsResponse,
    ListSubmissionsUseCase,
    PendingCountRequest,
    PendingCountResponse,
    PendingCountUseCase,
    ReviewDecision,
    ReviewSubmissionRequest,
    ReviewSubmissionResponse,
    ReviewSubmissionUseCase,
)
from tyrantcam.application.usecase.tyrant import (
    CreateTyrantRequest,
    CreateTyrantUseCase,
    DeleteTyrantRequest,
    DeleteTyrantResponse,
    DeleteTyrantUseCase,
    ListAllTyrantsRequest,
    ListAllTyrantsUseCase,
    SetPublicationRequest,
    SetPublicationUseCase,
    TyrantListResponse,
    TyrantResponse,
)
from tyrantcam.application.usecase.vote import (
    RevokeVoteRequest,
    RevokeVoteResponse,
    RevokeVoteUseCase,
)
from tyrantcam.config import Settings
from tyrantcam.domain.error import (
    InvalidCredentialsError,
    InvalidTransitionError,
    NotAuthorizedError,
    NotFoundError,
    TooManyAttemptsError,
)
from tyrantcam.domain.model.vote import VoteOutcome
from tyrantcam.domain.service import JWTService
from tyrantcam.domain.value import SubmissionStatus, TyrantCategory
from tyrantcam.util.jwt import JWTError

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AdminLoginAPIResponse(BaseModel):
    """API response for a successful login."""

    success: bool
    admin_id: str
    email: str


class AdminStatusResponse(BaseModel):
    """Admin authentication status."""

    authenticated: bool
    admin: Optional[GetCurrentAdminResponse] = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class ReviewSubmissionAPIRequest(BaseModel):
    """API request for reviewing a submission."""

    decision: ReviewDecision
    notes: Optional[str] = None


class CreateTyrantAPIRequest(BaseModel):
    """API request for creating a tyrant."""

    name: str
    title: str
    position: str
    category: TyrantCategory
    description: str
    image_url: Optional[str] = None
    evidence_urls: list[str] = []
    is_published: bool = False


class SetPublicationAPIRequest(BaseModel):
    """API request for publishing or unpublishing a tyrant."""

    is_published: bool


def _require_admin_id(
    request: Request, jwt_service: JWTService, settings: Settings
) -> str:
    """Resolve the admin ID from the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or not a valid admin token
    """
    token = request.cookies.get(settings.auth.cookie_name)
    admin_id = jwt_service.get_admin_id_from_token(token)
    if not admin_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin authentication required",
        )
    return admin_id


def _http_error(e: Exception) -> HTTPException:
    """Translate a domain error into an HTTP error."""
    if isinstance(e, NotAuthorizedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, InvalidTransitionError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ============================================================================
# SESSION
# ============================================================================


@router.post("/login", response_model=AdminLoginAPIResponse)
async def login(
    request: AdminLoginRequest,
    response: Response,
    admin_login_use_case: FromDishka[AdminLoginUseCase],
    settings: FromDishka[Settings],
) -> AdminLoginAPIResponse:
    """Log an administrator in and set the session cookie.

    Raises:
        HTTPException: 401 for bad credentials, 429 when locked out
    """
    try:
        result = await admin_login_use_case.execute(request)
    except TooManyAttemptsError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
            headers={"Retry-After": str(e.retry_after_seconds)},
        )
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="strict" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_hours * 60 * 60,
    )
    logfire.info("Admin session started", admin_id=result.admin_id)
    return AdminLoginAPIResponse(
        success=True, admin_id=result.admin_id, email=result.email
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Clear the admin session cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AdminStatusResponse)
async def get_current_admin(
    request: Request,
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> AdminStatusResponse:
    """Get the current admin, or authenticated=false.

    Safe to call without a session so the dashboard can probe login state.
    """
    token = request.cookies.get(settings.auth.cookie_name)
    if not token:
        return AdminStatusResponse(authenticated=False)

    try:
        admin = await get_current_admin_use_case.execute(
            GetCurrentAdminRequest(token=token)
        )
        return AdminStatusResponse(authenticated=True, admin=admin)
    except JWTError:
        return AdminStatusResponse(authenticated=False)
    except NotFoundError:
        # Token outlived its admin account
        return AdminStatusResponse(authenticated=False)


# ============================================================================
# SUBMISSIONS
# ============================================================================


@router.get("/submissions", response_model=ListSubmissionsResponse)
async def list_submissions(
    request: Request,
    list_submissions_use_case: FromDishka[ListSubmissionsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    status_filter: Optional[SubmissionStatus] = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListSubmissionsResponse:
    """List the moderation queue, newest first."""
    admin_id = _require_admin_id(request, jwt_service, settings)
    try:
        return await list_submissions_use_case.execute(
            ListSubmissionsRequest(
                admin_id=admin_id, status=status_filter, limit=limit, offset=offset
            )
        )
    except NotAuthorizedError as e:
        raise _http_error(e)


@router.get("/submissions/pending/count", response_model=PendingCountResponse)
async def pending_count(
    request: Request,
    pending_count_use_case: FromDishka[PendingCountUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> PendingCountResponse:
    """Number of submissions waiting for review."""
    admin_id = _require_admin_id(request, jwt_service, settings)
    return await pending_count_use_case.execute(PendingCountRequest(admin_id=admin_id))


@router.post(
    "/submissions/{submission_id}/review", response_model=ReviewSubmissionResponse
)
async def review_submission(
    submission_id: UUID,
    body: ReviewSubmissionAPIRequest,
    request: Request,
    review_submission_use_case: FromDishka[ReviewSubmissionUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ReviewSubmissionResponse:
    """Approve or reject a pending submission.

    Approval creates an unpublished draft tyrant from the submission.

    Raises:
        HTTPException: 404 for unknown submissions, 409 if already reviewed
    """
    admin_id = _require_admin_id(request, jwt_service, settings)
    try:
        return await review_submission_use_case.execute(
            ReviewSubmissionRequest(
                admin_id=admin_id,
                submission_id=str(submission_id),
                decision=body.decision,
                notes=body.notes,
            )
        )
    except (NotAuthorizedError, NotFoundError, InvalidTransitionError) as e:
        logfire.warn("Submission review failed", error=str(e))
        raise _http_error(e)


# ============================================================================
# TYRANTS
# ============================================================================


@router.post(
    "/tyrants", response_model=TyrantResponse, status_code=status.HTTP_201_CREATED
)
async def create_tyrant(
    body: CreateTyrantAPIRequest,
    request: Request,
    create_tyrant_use_case: FromDishka[CreateTyrantUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> TyrantResponse:
    """Create a tyrant directly, unpublished unless requested otherwise.

    Raises:
        HTTPException: 422 if the tyrant fails validation
    """
    admin_id = _require_admin_id(request, jwt_service, settings)
    try:
        use_case_request = CreateTyrantRequest(admin_id=admin_id, **body.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        return await create_tyrant_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        raise _http_error(e)


@router.get("/tyrants", response_model=TyrantListResponse)
async def list_all_tyrants(
    request: Request,
    list_all_tyrants_use_case: FromDishka[ListAllTyrantsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> TyrantListResponse:
    """List every tyrant including drafts, newest first."""
    admin_id = _require_admin_id(request, jwt_service, settings)
    return await list_all_tyrants_use_case.execute(
        ListAllTyrantsRequest(admin_id=admin_id, limit=limit, offset=offset)
    )


@router.put("/tyrants/{tyrant_id}/publication", response_model=TyrantResponse)
async def set_publication(
    tyrant_id: UUID,
    body: SetPublicationAPIRequest,
    request: Request,
    set_publication_use_case: FromDishka[SetPublicationUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> TyrantResponse:
    """Publish or unpublish a tyrant."""
    admin_id = _require_admin_id(request, jwt_service, settings)
    try:
        return await set_publication_use_case.execute(
            SetPublicationRequest(
                admin_id=admin_id,
                tyrant_id=str(tyrant_id),
                is_published=body.is_published,
            )
        )
    except (NotAuthorizedError, NotFoundError) as e:
        raise _http_error(e)


@router.delete("/tyrants/{tyrant_id}", response_model=DeleteTyrantResponse)
async def delete_tyrant(
    tyrant_id: UUID,
    request: Request,
    delete_tyrant_use_case: FromDishka[DeleteTyrantUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> DeleteTyrantResponse:
    """Delete a tyrant; its votes are removed with it."""
    admin_id = _require_admin_id(request, jwt_service, settings)
    try:
        return await delete_tyrant_use_case.execute(
            DeleteTyrantRequest(admin_id=admin_id, tyrant_id=str(tyrant_id))
        )
    except (NotAuthorizedError, NotFoundError) as e:
        raise _http_error(e)


# ============================================================================
# VOTES
# ============================================================================


@router.delete("/votes/{vote_id}", response_model=RevokeVoteResponse)
async def revoke_vote(
    vote_id: UUID,
    request: Request,
    revoke_vote_use_case: FromDishka[RevokeVoteUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> RevokeVoteResponse:
    """Revoke a vote and decrement its tyrant's shame count.

    Raises:
        HTTPException: 404 for unknown votes, 503 on storage failure
    """
    admin_id = _require_admin_id(request, jwt_service, settings)
    result = await revoke_vote_use_case.execute(
        RevokeVoteRequest(vote_id=str(vote_id), admin_id=admin_id)
    )

    if result.outcome == VoteOutcome.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.detail)
    if result.outcome == VoteOutcome.NOT_AUTHORIZED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=result.detail)
    if result.outcome == VoteOutcome.STORAGE_ERROR:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.detail
        )
    return result
