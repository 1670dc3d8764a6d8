"""Prometheus metrics for balance history requests and data quality"""

from prometheus_client import Counter, Histogram

# History metrics
history_request_counter = Counter(
    "balance_history_requests_total",
    "Balance histories computed",
    ["interval"],  # hour | day | week | month | year
)

history_rejected_counter = Counter(
    "balance_history_rejected_total",
    "Balance history requests rejected before computation",
    ["reason"],  # invalid_interval | invalid_session
)

history_computation_histogram = Histogram(
    "balance_history_computation_seconds",
    "Time spent reconstructing a balance history",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

# Data quality
data_integrity_fault_counter = Counter(
    "data_integrity_faults_total",
    "Stored records that could not be interpreted",
    ["endpoint"],  # balance_history | savings_goals
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_history(interval: str, duration_seconds: float) -> None:
    """Record one successfully computed history"""
    history_request_counter.labels(interval=interval).inc()
    history_computation_histogram.observe(duration_seconds)
