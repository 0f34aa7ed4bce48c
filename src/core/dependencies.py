"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from src.application.services import DecisionService
from src.service.scoring import ScoringSettings
from src.service.scoring.settings import get_scoring_settings


def get_scoring_config() -> ScoringSettings:
    """Get the scoring settings used for new decision services."""
    return get_scoring_settings()


def get_decision_service(
    scoring_config: Annotated[ScoringSettings, Depends(get_scoring_config)],
) -> DecisionService:
    """Get a DecisionService instance bound to the scoring settings."""
    return DecisionService(settings=scoring_config)
