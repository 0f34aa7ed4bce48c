"""Reference applicant dataset used for demos and regression checks."""

from typing import List, Optional

from .models import Applicant
from .settings import ScoringSettings

# (name, credit_score, income, loan_amount, existing_debt, defaults)
REFERENCE_APPLICANTS = [
    ("Amar", 750, 5000.0, 10000.0, 1000.0, 0),
    ("Snehal", 550, 2000.0, 7000.0, 4000.0, 1),
    ("Nikita", 620, 4500.0, 12000.0, 2000.0, 0),
    ("sudhanshu", 400, 1800.0, 5000.0, 3000.0, 1),
    ("kajal", 680, 6000.0, 15000.0, 2500.0, 0),
]


def reference_applicants(settings: Optional[ScoringSettings] = None) -> List[Applicant]:
    """Build the five reference applicants in their listed order."""
    return [
        Applicant(
            name=name,
            credit_score=credit_score,
            income=income,
            loan_amount=loan_amount,
            existing_debt=existing_debt,
            defaults=defaults,
            settings=settings,
        )
        for name, credit_score, income, loan_amount, existing_debt, defaults
        in REFERENCE_APPLICANTS
    ]
