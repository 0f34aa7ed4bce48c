"""Data Transfer Objects for application layer."""

from .decision import (
    ApplicantData,
    BatchDecisionRequest,
    BatchDecisionResponse,
    VerdictDTO,
)

__all__ = [
    "ApplicantData",
    "BatchDecisionRequest",
    "BatchDecisionResponse",
    "VerdictDTO",
]
