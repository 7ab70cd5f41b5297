"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry
import time
from functools import wraps
from typing import Callable

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

quotes_calculated = Counter(
    'delivery_quotes_total',
    'Total delivery quotes calculated',
    ['zone'],
    registry=registry
)

quote_duration = Histogram(
    'delivery_quote_duration_seconds',
    'Time spent pricing all tariffs for one request',
    registry=registry
)

city_lookups = Counter(
    'city_lookups_total',
    'City resolution attempts by outcome',
    ['outcome'],
    registry=registry
)

calculation_errors = Counter(
    'delivery_calculation_errors_total',
    'Requests that failed with an internal calculation error',
    ['kind'],
    registry=registry
)

dataset_cities = Gauge(
    'reference_dataset_cities',
    'Number of cities in the active reference dataset',
    registry=registry
)

dataset_reloads = Counter(
    'reference_dataset_reloads_total',
    'Number of times the reference dataset was replaced',
    registry=registry
)


def track_duration(histogram: Histogram):
    """Decorator observing the wall time of a synchronous call"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                histogram.observe(time.time() - start_time)
        return wrapper
    return decorator


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')
