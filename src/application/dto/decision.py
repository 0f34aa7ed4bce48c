"""Data transfer objects for batch decision operations."""

import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ApplicantData:
    """Raw applicant fields as supplied by a caller."""
    name: str
    credit_score: int
    income: float
    loan_amount: float
    existing_debt: float
    defaults: int

    def validate(self) -> List[str]:
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name is required")

        if self.credit_score <= 0:
            errors.append(f"{self.name}: credit_score must be positive")

        if not all(math.isfinite(v) for v in (self.income, self.loan_amount, self.existing_debt)):
            errors.append(f"{self.name}: amounts must be finite")

        if self.loan_amount < 0 or self.existing_debt < 0:
            errors.append(f"{self.name}: amounts cannot be negative")

        if self.defaults < 0:
            errors.append(f"{self.name}: defaults cannot be negative")

        return errors


@dataclass(frozen=True)
class BatchDecisionRequest:
    """A batch of applicants to evaluate together."""
    applicants: List[ApplicantData]

    def validate(self) -> List[str]:
        errors = []
        for applicant in self.applicants:
            errors.extend(applicant.validate())
        return errors


@dataclass(frozen=True)
class VerdictDTO:
    """One applicant's verdict."""

    name: str
    credit_score: int
    dti: float
    risk_score: float
    tree_result: str
    bayes_result: str
    final_decision: str

    @classmethod
    def from_verdict(cls, verdict) -> "VerdictDTO":
        return cls(
            name=verdict.name,
            credit_score=verdict.credit_score,
            dti=verdict.dti,
            risk_score=verdict.risk_score,
            tree_result=verdict.tree_result.value,
            bayes_result=verdict.bayes_result.value,
            final_decision=verdict.final_decision.value,
        )


@dataclass(frozen=True)
class BatchDecisionResponse:
    """Verdicts for a batch, lowest risk first."""

    processed_count: int
    approved_count: int
    verdicts: List[VerdictDTO]

    @classmethod
    def from_verdicts(cls, verdicts: list) -> "BatchDecisionResponse":
        return cls(
            processed_count=len(verdicts),
            approved_count=sum(1 for v in verdicts if v.approved),
            verdicts=[VerdictDTO.from_verdict(v) for v in verdicts],
        )
