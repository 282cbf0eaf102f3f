"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from ead.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Service status and the backend it is wired to."""

    status: str
    checked_at: datetime
    environment: str
    backend_url: str
    locale: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the service is up.

    The EAD backend is not called; ``backend_url`` only shows where the
    gateway points.
    """
    return HealthResponse(
        status="healthy",
        checked_at=datetime.now(),
        environment=settings.environment,
        backend_url=settings.backend.base_url,
        locale=settings.labels.locale,
    )
