"""
Unit Tests for the Loan Triage Risk Scorer.

These tests verify:
1. Debt-to-income ratio, including the zero-income sentinel
2. Composite risk score formula
3. Derived fields on Applicant and their immutability
"""

import dataclasses

import pytest

from src.domain.exceptions import InvalidApplicantException
from src.service.scoring.models import Applicant
from src.service.scoring.risk_score import calculate_dti, calculate_risk_score
from src.service.scoring.settings import ScoringSettings, scoring_settings


def make_applicant(
    credit_score: int = 700,
    income: float = 5000.0,
    existing_debt: float = 1000.0,
    defaults: int = 0,
    name: str = "test",
    **kwargs,
) -> Applicant:
    """Helper to create an applicant with sensible defaults."""
    return Applicant(
        name=name,
        credit_score=credit_score,
        income=income,
        loan_amount=10000.0,
        existing_debt=existing_debt,
        defaults=defaults,
        **kwargs,
    )


class TestCalculateDTI:
    """Tests for calculate_dti()."""

    def test_debt_over_income(self):
        assert calculate_dti(5000.0, 1000.0) == 0.2

    def test_debt_exceeds_income(self):
        assert calculate_dti(2000.0, 4000.0) == 2.0

    def test_no_debt(self):
        assert calculate_dti(3000.0, 0.0) == 0.0

    def test_zero_income_returns_sentinel(self):
        """Zero income should flag unaffordability instead of raising."""
        assert calculate_dti(0.0, 1000.0) == 1e9

    def test_negative_income_returns_sentinel(self):
        assert calculate_dti(-100.0, 1000.0) == 1e9

    def test_custom_sentinel(self):
        settings = ScoringSettings(infinite_dti=999.0)
        assert calculate_dti(0.0, 1000.0, settings) == 999.0


class TestCalculateRiskScore:
    """Tests for calculate_risk_score()."""

    def test_formula(self):
        score = calculate_risk_score(credit_score=500, dti=0.5, defaults=2)
        assert score == pytest.approx(1 / 500 + 0.5 + 1.0)

    def test_no_defaults(self):
        score = calculate_risk_score(credit_score=750, dti=0.2, defaults=0)
        assert score == pytest.approx(0.2013333, abs=1e-6)

    def test_higher_credit_score_lowers_risk(self):
        low = calculate_risk_score(credit_score=400, dti=0.3, defaults=0)
        high = calculate_risk_score(credit_score=800, dti=0.3, defaults=0)
        assert high < low

    def test_custom_defaults_weight(self):
        settings = ScoringSettings(defaults_weight=2.0)
        score = calculate_risk_score(credit_score=1000, dti=0.0, defaults=3, settings=settings)
        assert score == pytest.approx(0.001 + 6.0)


class TestApplicant:
    """Tests for derived fields on Applicant."""

    def test_derived_fields_computed(self):
        applicant = make_applicant(credit_score=620, income=4500, existing_debt=2000)
        assert applicant.dti == pytest.approx(2000 / 4500)
        assert applicant.risk_score == pytest.approx(1 / 620 + 2000 / 4500)

    def test_defaults_add_half_point_each(self):
        clean = make_applicant(defaults=0)
        one = make_applicant(defaults=1)
        assert one.risk_score - clean.risk_score == pytest.approx(0.5)

    def test_zero_income_uses_sentinel(self):
        applicant = make_applicant(income=0.0)
        assert applicant.dti == 1e9
        assert applicant.risk_score > 1e9

    def test_settings_are_applied(self):
        settings = ScoringSettings(infinite_dti=42.0)
        applicant = make_applicant(income=0.0, settings=settings)
        assert applicant.dti == 42.0

    def test_zero_credit_score_rejected(self):
        """credit_score == 0 is a precondition violation."""
        with pytest.raises(InvalidApplicantException) as exc_info:
            make_applicant(credit_score=0, name="zero")
        assert exc_info.value.code == "INVALID_APPLICANT"
        assert "zero" in exc_info.value.message

    def test_negative_credit_score_rejected(self):
        with pytest.raises(InvalidApplicantException):
            make_applicant(credit_score=-5)

    def test_fields_are_immutable(self):
        applicant = make_applicant()
        with pytest.raises(dataclasses.FrozenInstanceError):
            applicant.income = 1.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            applicant.risk_score = 0.0

    def test_replace_recomputes_derived_fields(self):
        """Copying with new raw fields must recompute dti and risk_score."""
        applicant = make_applicant(income=5000.0, existing_debt=1000.0)
        updated = dataclasses.replace(applicant, existing_debt=2500.0)
        assert updated.dti == pytest.approx(0.5)
        assert updated.risk_score == pytest.approx(1 / 700 + 0.5)

    def test_replace_keeps_custom_settings(self):
        """A copy is scored with the settings of the original, not the global ones."""
        settings = ScoringSettings(infinite_dti=42.0, defaults_weight=2.0)
        applicant = make_applicant(income=0.0, settings=settings)

        updated = dataclasses.replace(applicant, existing_debt=5.0, defaults=1)

        assert updated.settings is settings
        assert updated.dti == 42.0
        assert updated.risk_score == pytest.approx(1 / 700 + 42.0 + 2.0)

    def test_replace_accepts_new_settings(self):
        applicant = make_applicant(income=0.0, settings=ScoringSettings(infinite_dti=42.0))
        updated = dataclasses.replace(applicant, settings=ScoringSettings(infinite_dti=7.0))
        assert updated.dti == 7.0

    def test_settings_default_to_global(self):
        assert make_applicant().settings is scoring_settings

    def test_settings_not_part_of_equality(self):
        first = make_applicant(settings=ScoringSettings(defaults_weight=0.5))
        second = make_applicant(settings=ScoringSettings(defaults_weight=0.5))
        assert first == second
