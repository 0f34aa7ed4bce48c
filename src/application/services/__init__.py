"""Application services (use cases) for loan triage."""

from .decision_service import DecisionService

__all__ = ["DecisionService"]
