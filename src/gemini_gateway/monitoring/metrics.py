"""Custom Prometheus metrics for the Gemini gateway.

Alert rules should be configured for:
- call_outcomes_total{outcome="exhausted"} (every credential failed for a call)
- credential_rotations_total (sustained rotation means keys are throttled)
"""

from prometheus_client import Counter, Histogram

# === Attempt Metrics ===

attempts_total = Counter(
    "gemini_attempts_total",
    "Physical attempts against generateContent by outcome",
    ["outcome"],
)
"""
Physical attempts counter.

Labels:
- outcome: transport_failure, success, safety_blocked, filtered_empty, malformed
"""

attempt_latency_seconds = Histogram(
    "gemini_attempt_latency_seconds",
    "Latency of one physical attempt in seconds",
    ["success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

# === Credential Metrics ===

credential_rotations_total = Counter(
    "gemini_credential_rotations_total",
    "Total credential rotations across all calls",
)

# === Call Metrics ===

call_outcomes_total = Counter(
    "gemini_call_outcomes_total",
    "Logical calls by public operation and final outcome",
    ["operation", "outcome"],
)
"""
Logical call outcome counter.

Labels:
- operation: send_message, generate_outline
- outcome: success, safety_blocked, filtered, exhausted

Alert thresholds:
- WARN: any exhausted outcome
- CRITICAL: exhausted rate > 5% of calls
"""
