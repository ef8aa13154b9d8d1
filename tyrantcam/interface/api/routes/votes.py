"""Vote routes.

Visitors are anonymous; each is identified by a fingerprint derived from
the client address.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from tyrantcam.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    CheckVoteRequest,
    CheckVoteResponse,
    CheckVoteUseCase,
)
from tyrantcam.config import VotingSettings
from tyrantcam.domain.model.vote import VoteOutcome
from tyrantcam.util.fingerprint import fingerprint_request

router = APIRouter(prefix="/tyrants", tags=["votes"], route_class=DishkaRoute)

# Outcomes that are rendered as errors; cast and duplicate return a body
OUTCOME_ERRORS = {
    VoteOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    VoteOutcome.VALIDATION_ERROR: 422,
    VoteOutcome.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    VoteOutcome.STORAGE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@router.post(
    "/{tyrant_id}/vote",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    tyrant_id: UUID,
    request: Request,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    voting_settings: FromDishka[VotingSettings],
) -> CastVoteResponse:
    """Shame a tyrant.

    Args:
        tyrant_id: Tyrant UUID
        request: Incoming request (used to fingerprint the visitor)
        response: FastAPI response object
        cast_vote_use_case: Cast vote use case from DI
        voting_settings: Fingerprint configuration from DI

    Returns:
        201 with the new shame count, or 200 with already_voted=true when the
        visitor has shamed this tyrant before

    Raises:
        HTTPException: 404 for unknown tyrants, 503 on storage failure
    """
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            tyrant_id=str(tyrant_id),
            fingerprint=fingerprint_request(request, voting_settings),
        )
    )

    if result.outcome in OUTCOME_ERRORS:
        raise HTTPException(
            status_code=OUTCOME_ERRORS[result.outcome], detail=result.detail
        )

    if result.outcome == VoteOutcome.DUPLICATE_VOTE:
        response.status_code = status.HTTP_200_OK
    return result


@router.get("/{tyrant_id}/vote", response_model=CheckVoteResponse)
async def check_vote(
    tyrant_id: UUID,
    request: Request,
    check_vote_use_case: FromDishka[CheckVoteUseCase],
    voting_settings: FromDishka[VotingSettings],
    window_hours: int | None = Query(default=None, ge=1, le=24 * 365),
) -> CheckVoteResponse:
    """Check whether the caller shamed a tyrant within the window.

    Args:
        tyrant_id: Tyrant UUID
        request: Incoming request (used to fingerprint the visitor)
        check_vote_use_case: Check vote use case from DI
        voting_settings: Fingerprint and default window configuration from DI
        window_hours: Look-back window, defaults to the configured window
    """
    return await check_vote_use_case.execute(
        CheckVoteRequest(
            tyrant_id=str(tyrant_id),
            fingerprint=fingerprint_request(request, voting_settings),
            window_hours=window_hours or voting_settings.has_voted_window_hours,
        )
    )
