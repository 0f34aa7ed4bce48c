"""Scoring pipeline exceptions."""

from .base import DomainException


class EmptyQueueException(DomainException):
    """Raised when removing from an empty applicant queue."""

    def __init__(self):
        super().__init__(
            message="Applicant queue is empty",
            code="EMPTY_QUEUE",
        )


class InvalidApplicantException(DomainException):
    """Raised when applicant fields violate a scoring precondition."""

    def __init__(self, name: str, reason: str):
        super().__init__(
            message=f"Invalid applicant {name!r}: {reason}",
            code="INVALID_APPLICANT",
        )
        self.name = name


class InvalidDecisionTreeException(DomainException):
    """Raised when a decision tree is malformed or not strictly tree-shaped."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_DECISION_TREE",
        )


class ModelFrozenException(DomainException):
    """Raised when training a Naive Bayes model after it was frozen."""

    def __init__(self):
        super().__init__(
            message="Naive Bayes model is frozen and cannot be trained further",
            code="MODEL_FROZEN",
        )
