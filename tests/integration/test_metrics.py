"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Business metrics (decisions, classifier predictions) are tracked
3. Technical metrics (batch size, HTTP requests) are recorded
"""

import pytest
from httpx import AsyncClient

from src.core.metrics import REGISTRY


def sample(name: str, labels: dict | None = None) -> float:
    """Read a metric sample value, treating an absent sample as 0."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "loan_triage_" in response.text


class TestDecisionMetrics:
    """Business metrics recorded per verdict."""

    @pytest.mark.asyncio
    async def test_decision_outcomes_counted(
        self,
        client: AsyncClient,
        reference_request: dict,
    ):
        approved_before = sample("loan_triage_decision_total", {"outcome": "approved"})
        rejected_before = sample("loan_triage_decision_total", {"outcome": "rejected"})

        await client.post("/v1/decisions", json=reference_request)

        assert sample("loan_triage_decision_total", {"outcome": "approved"}) - approved_before == 2
        assert sample("loan_triage_decision_total", {"outcome": "rejected"}) - rejected_before == 3

    @pytest.mark.asyncio
    async def test_classifier_predictions_counted(
        self,
        client: AsyncClient,
        reference_request: dict,
    ):
        labels = {"classifier": "naive_bayes", "prediction": "Approved"}
        before = sample("loan_triage_classifier_prediction_total", labels)

        await client.post("/v1/decisions", json=reference_request)

        assert sample("loan_triage_classifier_prediction_total", labels) - before == 3

    @pytest.mark.asyncio
    async def test_batch_size_observed(
        self,
        client: AsyncClient,
        reference_request: dict,
    ):
        count_before = sample("loan_triage_batch_size_count")
        sum_before = sample("loan_triage_batch_size_sum")

        await client.post("/v1/decisions", json=reference_request)

        assert sample("loan_triage_batch_size_count") - count_before == 1
        assert sample("loan_triage_batch_size_sum") - sum_before == 5

    @pytest.mark.asyncio
    async def test_approval_rate_in_range(
        self,
        client: AsyncClient,
        reference_request: dict,
    ):
        await client.post("/v1/decisions", json=reference_request)

        assert 0.0 <= sample("loan_triage_approval_rate") <= 1.0


class TestHttpMetrics:
    """HTTP request metrics recorded by the logging middleware."""

    @pytest.mark.asyncio
    async def test_http_requests_counted(self, client: AsyncClient):
        labels = {"method": "GET", "endpoint": "/v1/health", "status": "200"}
        before = sample("loan_triage_http_requests_total", labels)

        await client.get("/v1/health")

        assert sample("loan_triage_http_requests_total", labels) - before == 1
