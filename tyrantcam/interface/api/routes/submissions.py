"""Public submission routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from tyrantcam.application.usecase.submission import (
    CreateSubmissionRequest,
    CreateSubmissionResponse,
    CreateSubmissionUseCase,
)

router = APIRouter(prefix="/submissions", tags=["submissions"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=CreateSubmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_submission(
    request: CreateSubmissionRequest,
    create_submission_use_case: FromDishka[CreateSubmissionUseCase],
) -> CreateSubmissionResponse:
    """Report a tyrant for moderation.

    No authentication is required; reporter_contact is optional.

    Raises:
        HTTPException: 422 if the submission fails domain validation
    """
    try:
        return await create_submission_use_case.execute(request)
    except ValueError as e:
        logfire.warn("Submission validation error", error=str(e))
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
