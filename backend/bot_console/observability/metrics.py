"""
Prometheus Metrics for the Bot Console Backend.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Gauge: Value goes up/down (live sessions)
    - Counter: Value only goes up (connect attempts, upstream errors)
    - Histogram: Distribution (request latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
ACTIVE_SESSIONS = Gauge(
    "console_active_sessions", "Number of bots with a live gateway session"
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30],
)

CONNECT_ATTEMPTS_TOTAL = Counter(
    "console_connect_attempts_total",
    "Total number of bot login attempts by outcome",
    ["outcome"],
)

SESSION_DISCONNECTS_TOTAL = Counter(
    "console_session_disconnects_total",
    "Total number of sessions ended, by who ended them",
    ["reason"],
)

UPSTREAM_ERRORS_TOTAL = Counter(
    "console_upstream_errors_total",
    "Total number of failed gateway calls by error kind",
    ["kind"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class ConnectOutcome:
    """Outcome labels for console_connect_attempts_total."""

    SUCCESS = "success"
    AUTH_FAILED = "auth_failed"
    TIMEOUT = "timeout"
    FAILED = "failed"
    CANCELLED = "cancelled"


class DisconnectReason:
    """Reason labels for console_session_disconnects_total."""

    EXPLICIT = "explicit"
    REMOTE = "remote"
    STALE = "stale"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def set_active_sessions(count: int):
    """Integration point: application/services/session_manager.py"""
    ACTIVE_SESSIONS.set(count)


def increment_connect_attempt(outcome: str):
    CONNECT_ATTEMPTS_TOTAL.labels(outcome=outcome).inc()


def increment_session_disconnect(reason: str):
    SESSION_DISCONNECTS_TOTAL.labels(reason=reason).inc()


def increment_upstream_error(kind: str):
    """Integration point: SessionManager.use() when a gateway call fails"""
    UPSTREAM_ERRORS_TOTAL.labels(kind=kind).inc()


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Integration point: MetricsMiddleware in fastapi_app.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
