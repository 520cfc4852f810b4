"""Native Prometheus instrumentation for the HTTP service.

Request counters/latency are recorded by the middleware in ``rupiah.main``;
codec operations are counted per operation and outcome so rejected parses are
visible on ``/metrics``.
"""
from __future__ import annotations

from datetime import datetime, UTC

from prometheus_client import Counter, Gauge, Histogram

APP_START_TIME = datetime.now(UTC)

APP_REQUEST_COUNT = Counter(
    "app_requests_total",
    "Total HTTP requests processed",
    ["method", "path", "status"],
)
APP_REQUEST_LATENCY = Histogram(
    "app_request_duration_seconds",
    "Request latency in seconds",
    ["method", "path", "status"],
)
APP_UPTIME_SECONDS = Gauge(
    "app_uptime_seconds",
    "Application uptime in seconds",
)
CODEC_OPERATIONS = Counter(
    "codec_operations_total",
    "Currency codec calls served over HTTP",
    ["operation", "outcome"],
)


def record_request(method: str, path: str, status: int, duration_s: float) -> None:
    APP_REQUEST_COUNT.labels(method, path, str(status)).inc()
    APP_REQUEST_LATENCY.labels(method, path, str(status)).observe(duration_s)
    APP_UPTIME_SECONDS.set((datetime.now(UTC) - APP_START_TIME).total_seconds())


def record_codec_operation(operation: str, outcome: str = "ok") -> None:
    CODEC_OPERATIONS.labels(operation, outcome).inc()


__all__ = [
    "APP_START_TIME",
    "APP_REQUEST_COUNT",
    "APP_REQUEST_LATENCY",
    "APP_UPTIME_SECONDS",
    "CODEC_OPERATIONS",
    "record_request",
    "record_codec_operation",
]
