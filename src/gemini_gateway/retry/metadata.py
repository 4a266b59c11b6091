"""
Retry metadata and call outcome.

RetryMetadata captures the attempt history of one logical call; CallOutcome
is the structured result the engine hands back to the service layer.
"""

from dataclasses import dataclass, field
from typing import Optional

from gemini_gateway.models.enums import OutcomeKind


@dataclass(frozen=True)
class RetryMetadata:
    """
    Attempt history of one logical call.

    Attributes:
        total_attempts: Physical attempts made (1..N)
        credential_indices: Pool index used by each attempt, in order
        failures: Details of each retryable failure (transport or malformed)
        total_latency_ms: Time from first attempt to final result (ms)
    """

    total_attempts: int
    credential_indices: list[int]
    total_latency_ms: int
    failures: list[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate metadata invariants."""
        if self.total_attempts < 1:
            raise ValueError("total_attempts must be >= 1")

        if len(self.credential_indices) != self.total_attempts:
            raise ValueError("credential_indices must have one entry per attempt")

        if self.total_latency_ms < 0:
            raise ValueError("total_latency_ms must be >= 0")


@dataclass(frozen=True)
class CallOutcome:
    """
    Structured result of a logical call that did not exhaust the pool.

    `text` is set only for OutcomeKind.SUCCESS; other kinds are rendered
    to user-facing text by FailureMessages.
    """

    kind: OutcomeKind
    metadata: RetryMetadata
    text: Optional[str] = None
    reason: Optional[str] = None  # block reason or finish reason for terminal kinds
