"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .decision import InvalidDecisionRequestException
from .scoring import (
    EmptyQueueException,
    InvalidApplicantException,
    InvalidDecisionTreeException,
    ModelFrozenException,
)

__all__ = [
    "DomainException",
    "InvalidDecisionRequestException",
    "EmptyQueueException",
    "InvalidApplicantException",
    "InvalidDecisionTreeException",
    "ModelFrozenException",
]
