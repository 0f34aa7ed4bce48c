"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Scoring settings override for a custom decision tree
- Request bodies for the reference applicants
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_scoring_config
from src.service.scoring import ScoringSettings
from src.service.scoring.sample_data import REFERENCE_APPLICANTS


# =============================================================================
# Clients
# =============================================================================

@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client using the default scoring settings."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client_without_tree() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose scoring settings disable the decision tree."""
    def override_get_scoring_config():
        return ScoringSettings(decision_tree_json="null")

    app.dependency_overrides[get_scoring_config] = override_get_scoring_config

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

def applicant_body(
    name: str,
    credit_score: int,
    income: float,
    loan_amount: float,
    existing_debt: float,
    defaults: int,
) -> dict:
    """Request body entry for one applicant."""
    return {
        "name": name,
        "credit_score": credit_score,
        "income": income,
        "loan_amount": loan_amount,
        "existing_debt": existing_debt,
        "defaults": defaults,
    }


@pytest.fixture
def reference_request() -> dict:
    """Request body holding the five reference applicants."""
    return {"applicants": [applicant_body(*row) for row in REFERENCE_APPLICANTS]}


@pytest.fixture
def single_applicant_request() -> dict:
    """Request body with one strong applicant (trains on itself only)."""
    return {"applicants": [applicant_body("solo", 780, 8000, 5000, 500, 0)]}
