"""Pydantic schemas for API request/response validation."""

from .decision import (
    ApplicantSchema,
    BatchDecisionRequestSchema,
    BatchDecisionResponseSchema,
    VerdictSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "ApplicantSchema",
    "BatchDecisionRequestSchema",
    "BatchDecisionResponseSchema",
    "VerdictSchema",
    "ErrorResponseSchema",
]
