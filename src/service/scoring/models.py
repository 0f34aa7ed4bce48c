"""
Data models for loan triage scoring.

These models represent the data structures used throughout the scoring
pipeline, from the raw applicant record to the final per-applicant verdict.
"""

from dataclasses import InitVar, dataclass, field
from enum import Enum
from typing import Optional

from src.domain.exceptions import InvalidApplicantException

from .risk_score import calculate_dti, calculate_risk_score
from .settings import ScoringSettings, scoring_settings


class Prediction(str, Enum):
    """Outcome of a single classifier."""
    APPROVED = "Approved"
    REJECTED = "Rejected"
    UNDECIDED = "Undecided"  # Only produced for an absent decision tree


class FinalDecision(str, Enum):
    """Combined verdict for an applicant."""
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Applicant:
    """
    A loan applicant with derived affordability metrics.

    The derived fields are computed once from the raw fields at construction.
    The dataclass is frozen, so raw fields can never drift from them.

    Attributes:
        name: Applicant display name
        credit_score: Bureau credit score, must be positive
        income: Monthly income
        loan_amount: Requested loan amount
        existing_debt: Outstanding debt
        defaults: Number of prior defaults
        dti: Debt-to-income ratio (settings.infinite_dti when income <= 0)
        risk_score: 1/credit_score + dti + defaults_weight * defaults.
            Lower is better.
        settings: Scoring settings the derived fields were computed with.
            Kept on the instance so dataclasses.replace() reuses them.
    """
    name: str
    credit_score: int
    income: float
    loan_amount: float
    existing_debt: float
    defaults: int
    settings: InitVar[Optional[ScoringSettings]] = None
    dti: float = field(init=False)
    risk_score: float = field(init=False)

    def __post_init__(self, settings: Optional[ScoringSettings]) -> None:
        if settings is None:
            settings = scoring_settings
        object.__setattr__(self, "settings", settings)
        if self.credit_score <= 0:
            raise InvalidApplicantException(
                self.name, f"credit_score must be positive, got {self.credit_score}"
            )

        dti = calculate_dti(self.income, self.existing_debt, settings)
        object.__setattr__(self, "dti", dti)
        object.__setattr__(
            self,
            "risk_score",
            calculate_risk_score(self.credit_score, dti, self.defaults, settings),
        )


@dataclass
class DecisionTreeNode:
    """
    A binary threshold node of the credit score decision tree.

    Scores below the threshold go left, all others go right. A missing
    child is a terminal case (Rejected on the left, Approved on the right).
    """
    threshold: int
    left: Optional["DecisionTreeNode"] = None
    right: Optional["DecisionTreeNode"] = None


@dataclass(frozen=True)
class ApplicantVerdict:
    """
    The outcome of running one applicant through the pipeline.

    Attributes:
        name: Applicant name
        credit_score: Applicant credit score
        dti: Debt-to-income ratio
        risk_score: Composite risk score (lower = lower risk)
        tree_result: Decision tree classification
        bayes_result: Naive Bayes prediction
        final_decision: Combined verdict
    """
    name: str
    credit_score: int
    dti: float
    risk_score: float
    tree_result: Prediction
    bayes_result: Prediction
    final_decision: FinalDecision

    @property
    def approved(self) -> bool:
        return self.final_decision == FinalDecision.APPROVED

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "name": self.name,
            "credit_score": self.credit_score,
            "dti": self.dti,
            "risk_score": self.risk_score,
            "tree_result": self.tree_result.value,
            "bayes_result": self.bayes_result.value,
            "final_decision": self.final_decision.value,
        }
