"""Monitoring and metrics instrumentation for the Gemini gateway.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from gemini_gateway.monitoring.metrics import (
    attempt_latency_seconds,
    attempts_total,
    call_outcomes_total,
    credential_rotations_total,
)

__all__ = [
    "attempts_total",
    "attempt_latency_seconds",
    "credential_rotations_total",
    "call_outcomes_total",
]
