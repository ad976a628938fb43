"""Prometheus metrics for payoff plans, recommendations and debt source health"""

from prometheus_client import Counter, Histogram

# Plan metrics
plan_counter = Counter(
    "debt_planner_plans_total",
    "Payoff plans computed",
    ["strategy", "outcome"],  # converged | capped
)

months_to_debt_free_histogram = Histogram(
    "debt_planner_months_to_debt_free",
    "Simulated months until debt free",
    buckets=[0, 6, 12, 24, 36, 60, 120, 240, 600],
)

recommendation_counter = Counter(
    "debt_planner_recommendations_total",
    "Strategy recommendations issued",
    ["strategy", "rule"],
)

# Debt source metrics
debt_source_failures_counter = Counter(
    "debt_source_failures_total",
    "Failed debt record reads",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_plan(strategy: str, months_to_debt_free: int, converged: bool) -> None:
    """Record plan outcome for tracking capped (non-convergent) projections"""
    outcome = "converged" if converged else "capped"
    plan_counter.labels(strategy=strategy, outcome=outcome).inc()
    months_to_debt_free_histogram.observe(months_to_debt_free)


def record_recommendation(strategy: str, rule: str) -> None:
    recommendation_counter.labels(strategy=strategy, rule=rule).inc()
