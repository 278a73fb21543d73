"""Monitoring configuration for LingoCards."""
from prometheus_client import Counter, Gauge, Histogram, start_http_server

# Review metrics
answers_recorded = Counter(
    "lingocards_answers_total",
    "Total number of answers recorded for vocabulary words",
    ["language", "outcome"],
)

review_interval_days = Histogram(
    "lingocards_review_interval_days",
    "Days until the next review, as scheduled after an answer",
    buckets=[1, 2, 3, 4, 5, 6, 7],
)

due_words = Gauge(
    "lingocards_due_words",
    "Number of words currently due for review",
    ["language"],
)

# Session metrics
sessions_started = Counter(
    "lingocards_sessions_started_total",
    "Total number of lesson sessions started",
    ["mode"],
)

sessions_completed = Counter(
    "lingocards_sessions_completed_total",
    "Total number of lesson sessions completed",
    ["mode"],
)

session_size = Histogram(
    "lingocards_session_size_words",
    "Number of words in a lesson session",
    ["mode"],
    buckets=[1, 3, 5, 10, 20],
)

session_duration = Histogram(
    "lingocards_session_duration_seconds",
    "Duration of lesson sessions in seconds",
    ["mode"],
    buckets=[60, 300, 600, 1800, 3600],  # 1min, 5min, 10min, 30min, 1hour
)

# Error metrics
error_count = Counter(
    "lingocards_errors_total",
    "Total number of errors encountered",
    ["error_type"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
