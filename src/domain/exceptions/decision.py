"""Decision request exceptions."""

from .base import DomainException


class InvalidDecisionRequestException(DomainException):
    """Raised when a batch decision request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_DECISION_REQUEST",
        )
