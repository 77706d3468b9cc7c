"""Prometheus metrics for monitoring score distribution and validation rejects"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "credit_simulation_total",
    "Total credit score simulations persisted",
    ["risk_category"],  # Low risk | Medium risk | High risk
)

score_histogram = Histogram(
    "credit_score",
    "Distribution of computed credit scores",
    buckets=[300, 400, 500, 600, 650, 700, 750, 800, 850],
)

validation_failure_counter = Counter(
    "validation_failures_total",
    "Simulation requests rejected by input validation",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(score: int, risk_category: str) -> None:
    """Record score and risk category of a persisted simulation"""
    simulation_counter.labels(risk_category=risk_category).inc()
    score_histogram.observe(score)
