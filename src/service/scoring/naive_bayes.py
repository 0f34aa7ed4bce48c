"""
Naive Bayes Classifier for the Loan Triage Engine.

Estimates an approval probability per coarse credit score bucket from the
default history of a training population:

    bucket            = 1 if credit_score >= bucket_threshold else 0
    approve_prob      = approved / (approved + rejected + smoothing)
    prediction        = Approved if approve_prob > approval_probability

Only applicants with exactly 0 defaults count as approved and only those
with exactly 1 default count as rejected. Applicants with 2 or more
defaults update neither counter.

The model moves through UNTRAINED -> TRAINED -> FROZEN. Training
accumulates counts across calls until the model is frozen; after that
the counts are read-only and safe to share between readers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable

import structlog

from src.domain.exceptions import ModelFrozenException

from .models import Applicant, Prediction
from .settings import ScoringSettings, scoring_settings

logger = structlog.get_logger(__name__)


class ModelState(str, Enum):
    """Lifecycle state of a Naive Bayes model."""
    UNTRAINED = "untrained"
    TRAINED = "trained"
    FROZEN = "frozen"


@dataclass(frozen=True)
class BucketCounts:
    """Approved/rejected observations for one credit score bucket."""
    approved: int = 0
    rejected: int = 0


class NaiveBayesClassifier:
    """
    Approval predictor trained on bucketed credit scores.

    Predicting before training is allowed and rejects every applicant,
    since an empty bucket has probability 0.
    """

    def __init__(self, settings: ScoringSettings = scoring_settings):
        self._settings = settings
        self._counts: Dict[int, BucketCounts] = {}
        self._state = ModelState.UNTRAINED

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def counts(self) -> Dict[int, BucketCounts]:
        """Snapshot of the per-bucket counts."""
        return dict(self._counts)

    def bucket_for(self, credit_score: int) -> int:
        """Map a credit score to its bucket key (0 or 1)."""
        return 1 if credit_score >= self._settings.bucket_threshold else 0

    def train(self, applicants: Iterable[Applicant]) -> "NaiveBayesClassifier":
        """
        Accumulate bucket counts from a set of applicants.

        Args:
            applicants: Training population

        Returns:
            self, to allow chaining

        Raises:
            ModelFrozenException: If the model has been frozen
        """
        if self._state == ModelState.FROZEN:
            raise ModelFrozenException()

        observed = 0
        for applicant in applicants:
            bucket = self.bucket_for(applicant.credit_score)
            current = self._counts.get(bucket, BucketCounts())
            self._counts[bucket] = BucketCounts(
                approved=current.approved + (applicant.defaults == 0),
                rejected=current.rejected + (applicant.defaults == 1),
            )
            observed += 1

        self._state = ModelState.TRAINED
        logger.debug(
            "naive_bayes_trained",
            applicants=observed,
            counts={k: (v.approved, v.rejected) for k, v in self._counts.items()},
        )
        return self

    def freeze(self) -> "NaiveBayesClassifier":
        """Forbid further training. Freezing twice is a no-op."""
        self._state = ModelState.FROZEN
        return self

    def approval_probability(self, applicant: Applicant) -> float:
        """Smoothed approval probability for the applicant's bucket."""
        counts = self._counts.get(self.bucket_for(applicant.credit_score), BucketCounts())
        denominator = counts.approved + counts.rejected + self._settings.smoothing
        if denominator == 0:
            # Only reachable with smoothing=0 and an empty bucket
            return 0.0
        return counts.approved / denominator

    def predict(self, applicant: Applicant) -> Prediction:
        """Predict Approved or Rejected for an applicant."""
        if self.approval_probability(applicant) > self._settings.approval_probability:
            return Prediction.APPROVED
        return Prediction.REJECTED
