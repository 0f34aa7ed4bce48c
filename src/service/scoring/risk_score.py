"""
Risk Score Calculation for the Loan Triage Engine.

This module derives the affordability metrics used to order applicants:
the debt-to-income ratio and a composite risk score where lower values
mean lower risk.
"""

from .settings import ScoringSettings, scoring_settings


def calculate_dti(
    income: float,
    existing_debt: float,
    settings: ScoringSettings = scoring_settings,
) -> float:
    """
    Calculate the debt-to-income ratio.

    Args:
        income: Applicant income
        existing_debt: Outstanding debt
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        existing_debt / income, or settings.infinite_dti when income <= 0
    """
    if income <= 0:
        # No income: flag as unaffordable instead of dividing by zero
        return settings.infinite_dti
    return existing_debt / income


def calculate_risk_score(
    credit_score: int,
    dti: float,
    defaults: int,
    settings: ScoringSettings = scoring_settings,
) -> float:
    """
    Calculate the composite risk score.

    Args:
        credit_score: Bureau credit score, must be positive
        dti: Debt-to-income ratio
        defaults: Number of prior defaults
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        1/credit_score + dti + defaults_weight * defaults (lower = lower risk)
    """
    return (1.0 / credit_score) + dti + (settings.defaults_weight * defaults)
