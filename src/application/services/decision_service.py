"""Decision service - orchestrates the batch loan triage use case."""

from typing import List

import structlog

from src.application.dto import (
    ApplicantData,
    BatchDecisionRequest,
    BatchDecisionResponse,
)
from src.core.metrics import record_verdict, track_batch_latency
from src.domain.exceptions import InvalidDecisionRequestException
from src.service.scoring import (
    Applicant,
    ApplicantVerdict,
    NaiveBayesClassifier,
    ScoringSettings,
    process_applicants,
    reference_applicants,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class DecisionService:
    """
    Application service for batch loan decisions.

    Each batch gets its own decision tree and Naive Bayes model, trained
    on that batch only; nothing is shared between requests.
    """

    def __init__(self, settings: ScoringSettings = scoring_settings):
        self._settings = settings

    def evaluate_batch(self, request: BatchDecisionRequest) -> BatchDecisionResponse:
        """
        Evaluate a batch of applicants.

        Args:
            request: The applicants to evaluate

        Returns:
            BatchDecisionResponse with verdicts in ascending risk order

        Raises:
            InvalidDecisionRequestException: If request validation fails
        """
        errors = request.validate()
        if errors:
            raise InvalidDecisionRequestException("; ".join(errors))

        applicants = [self._to_applicant(a) for a in request.applicants]
        return self._evaluate(applicants, source="request")

    def evaluate_reference(self) -> BatchDecisionResponse:
        """Evaluate the built-in reference dataset."""
        return self._evaluate(reference_applicants(self._settings), source="reference")

    def _to_applicant(self, data: ApplicantData) -> Applicant:
        return Applicant(
            name=data.name.strip(),
            credit_score=data.credit_score,
            income=data.income,
            loan_amount=data.loan_amount,
            existing_debt=data.existing_debt,
            defaults=data.defaults,
            settings=self._settings,
        )

    def _evaluate(self, applicants: List[Applicant], source: str) -> BatchDecisionResponse:
        log = logger.bind(source=source, batch_size=len(applicants))
        log.info("batch_requested")

        with track_batch_latency(len(applicants)):
            verdicts: List[ApplicantVerdict] = process_applicants(
                applicants,
                tree=self._settings.decision_tree,
                classifier=NaiveBayesClassifier(self._settings),
                settings=self._settings,
            )

        for verdict in verdicts:
            record_verdict(
                verdict.tree_result.value,
                verdict.bayes_result.value,
                verdict.approved,
            )

        response = BatchDecisionResponse.from_verdicts(verdicts)
        log.info(
            "batch_evaluated",
            processed=response.processed_count,
            approved=response.approved_count,
        )
        return response
