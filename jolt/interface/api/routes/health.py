"""Liveness route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from jolt.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness of the identity API process."""

    status: str
    service: str
    environment: str
    git_sha: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving. Does not touch the store."""
    return HealthResponse(
        status="healthy",
        service="jolt-identity",
        environment=settings.environment,
        git_sha=settings.git_sha,
        timestamp=datetime.now(timezone.utc),
    )
