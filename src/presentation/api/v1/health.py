"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src import __version__
from src.core.config import settings
from src.core.dependencies import get_scoring_config
from src.service.scoring import ScoringSettings, tree_depth

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str
    decision_tree_depth: int


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and the loaded tree depth.",
)
async def health_check(
    scoring_config: Annotated[ScoringSettings, Depends(get_scoring_config)],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=__version__,
        decision_tree_depth=tree_depth(scoring_config.decision_tree),
    )
