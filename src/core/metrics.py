"""Prometheus metrics for the Loan Triage service.

Metrics are organized into two categories:

Business Metrics:
- loan_triage_decision_total: Final decisions by outcome
- loan_triage_classifier_prediction_total: Predictions by classifier and outcome
- loan_triage_approval_rate: Running approval rate

Technical Metrics:
- loan_triage_batch_latency_seconds: Batch evaluation latency
- loan_triage_batch_size: Applicants per evaluated batch
- loan_triage_http_requests_total: HTTP requests by endpoint/status
- loan_triage_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

decision_total = Counter(
    "loan_triage_decision_total",
    "Total number of final loan decisions made",
    ["outcome"],  # approved, rejected
)

classifier_prediction_total = Counter(
    "loan_triage_classifier_prediction_total",
    "Classifier predictions by classifier and outcome",
    ["classifier", "prediction"],
)

approval_rate_gauge = Gauge(
    "loan_triage_approval_rate",
    "Approval rate since process start (0.0-1.0)",
)

# Track totals for computing rates
_approved_count = 0
_total_count = 0


# =============================================================================
# Technical Metrics
# =============================================================================

batch_latency = Histogram(
    "loan_triage_batch_latency_seconds",
    "Batch evaluation latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

batch_size = Histogram(
    "loan_triage_batch_size",
    "Number of applicants per evaluated batch",
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

http_requests_total = Counter(
    "loan_triage_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_triage_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_verdict(tree_result: str, bayes_result: str, approved: bool) -> None:
    """Record one applicant verdict in metrics."""
    global _approved_count, _total_count

    outcome = "approved" if approved else "rejected"
    decision_total.labels(outcome=outcome).inc()
    classifier_prediction_total.labels(classifier="decision_tree", prediction=tree_result).inc()
    classifier_prediction_total.labels(classifier="naive_bayes", prediction=bayes_result).inc()

    _total_count += 1
    if approved:
        _approved_count += 1

    approval_rate_gauge.set(_approved_count / _total_count)


@contextmanager
def track_batch_latency(size: int) -> Generator[None, None, None]:
    """Context manager to track batch evaluation latency and size."""
    batch_size.observe(size)
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        batch_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
