"""Liveness and readiness probes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from tyrantcam.config import Settings
from tyrantcam.domain.repository import TyrantRepository

API_VERSION = "0.1.0"

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness response; database is "ok" or "unavailable"."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up, with the deployed build."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=API_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response, tyrant_repository: FromDishka[TyrantRepository]
) -> ReadinessResponse:
    """Check that the entry store answers queries.

    Returns 503 while the database is unreachable so load balancers stop
    routing votes to this instance.
    """
    try:
        await tyrant_repository.count_published()
    except SQLAlchemyError as e:
        logfire.error("Readiness check failed", error=str(e))
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="unavailable", database="unavailable")
    return ReadinessResponse(status="ready", database="ok")
