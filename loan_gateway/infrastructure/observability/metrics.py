"""Prometheus metrics for monitoring eligibility outcomes and crime grade lookups"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan eligibility decisions made",
    ["outcome"],  # eligible | ineligible
)

crime_grade_counter = Counter(
    "loan_crime_grade_total",
    "Crime grades assigned to evaluated applications",
    ["grade"],
)

# Crime grade API metrics
crime_grade_failures_counter = Counter(
    "crime_grade_lookup_failures_total",
    "Crime grade lookups that fell back to the default grade",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(eligible: bool, crime_grade: str) -> None:
    """Record decision metrics for monitoring approval rates and grade distribution"""
    outcome = "eligible" if eligible else "ineligible"
    decision_counter.labels(outcome=outcome).inc()
    crime_grade_counter.labels(grade=crime_grade).inc()
