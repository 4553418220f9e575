"""Prometheus metrics for monitoring eligibility outcomes and score distribution"""

from prometheus_client import Counter, Histogram

# Evaluation metrics
evaluation_counter = Counter(
    "loan_eligibility_evaluations_total",
    "Total eligibility evaluations",
    ["status"],  # likely_approved | likely_rejected
)

score_histogram = Histogram(
    "loan_eligibility_score",
    "Aggregate eligibility score (0-100)",
    buckets=[20, 40, 59, 60, 70, 80, 90, 100],
)

invalid_input_counter = Counter(
    "loan_eligibility_invalid_input_total",
    "Evaluations rejected before scoring due to invalid applicant data",
)

evaluation_duration_histogram = Histogram(
    "loan_eligibility_evaluation_duration_seconds",
    "Time spent evaluating one application",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
)

# Calculator metrics
installment_counter = Counter(
    "loan_eligibility_installment_calculations_total",
    "EMI calculations served",
    ["frequency"],
)


def record_evaluation(status: str, score: int, duration_seconds: float) -> None:
    """Record evaluation metrics for monitoring approval rates and score distribution"""
    evaluation_counter.labels(status=status).inc()
    score_histogram.observe(score)
    evaluation_duration_histogram.observe(duration_seconds)
