"""Public tyrant routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status

from tyrantcam.application.usecase.tyrant import (
    GetTyrantRequest,
    GetTyrantUseCase,
    ListTyrantsRequest,
    ListTyrantsUseCase,
    TyrantListResponse,
    TyrantResponse,
)
from tyrantcam.config import VotingSettings
from tyrantcam.domain.error import NotFoundError
from tyrantcam.domain.value import TyrantCategory
from tyrantcam.util.fingerprint import fingerprint_request

router = APIRouter(prefix="/tyrants", tags=["tyrants"], route_class=DishkaRoute)


@router.get("", response_model=TyrantListResponse)
async def list_tyrants(
    request: Request,
    list_tyrants_use_case: FromDishka[ListTyrantsUseCase],
    voting_settings: FromDishka[VotingSettings],
    category: Optional[TyrantCategory] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> TyrantListResponse:
    """List published tyrants, most shamed first.

    Args:
        request: Incoming request (used to fingerprint the visitor)
        list_tyrants_use_case: List tyrants use case from DI
        voting_settings: Fingerprint configuration from DI
        category: Optional category filter
        limit: Page size
        offset: Number of tyrants to skip

    Returns:
        Page of tyrants with has_voted set for the caller
    """
    return await list_tyrants_use_case.execute(
        ListTyrantsRequest(
            category=category,
            limit=limit,
            offset=offset,
            fingerprint=fingerprint_request(request, voting_settings),
        )
    )


@router.get("/{tyrant_id}", response_model=TyrantResponse)
async def get_tyrant(
    tyrant_id: UUID,
    request: Request,
    get_tyrant_use_case: FromDishka[GetTyrantUseCase],
    voting_settings: FromDishka[VotingSettings],
) -> TyrantResponse:
    """Get a published tyrant.

    Raises:
        HTTPException: 404 if the tyrant doesn't exist or is unpublished
    """
    try:
        return await get_tyrant_use_case.execute(
            GetTyrantRequest(
                tyrant_id=str(tyrant_id),
                fingerprint=fingerprint_request(request, voting_settings),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
