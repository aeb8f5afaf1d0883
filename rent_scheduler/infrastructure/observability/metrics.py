"""Prometheus metrics for monitoring schedule volume, rejections, and latency"""

from prometheus_client import Counter, Histogram

# Schedule metrics
schedule_counter = Counter(
    "rent_schedule_total",
    "Total rent schedules generated",
    ["frequency", "payment_method"],
)

rejection_counter = Counter(
    "rent_schedule_rejections_total",
    "Schedule requests rejected by input validation",
    ["error"],  # InvalidInputError | InvalidDateError
)

payments_histogram = Histogram(
    "rent_schedule_payments",
    "Number of payments per generated schedule",
    buckets=[1, 4, 12, 26, 52, 104, 260, 520],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_schedule(frequency: str, payment_method: str, payment_count: int) -> None:
    """Record one generated schedule by cadence and payment method"""
    schedule_counter.labels(frequency=frequency, payment_method=payment_method).inc()
    payments_histogram.observe(payment_count)


def record_rejection(error: Exception) -> None:
    rejection_counter.labels(error=type(error).__name__).inc()
