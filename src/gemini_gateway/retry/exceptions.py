"""
Retry engine exceptions.

Defines the exception raised when every credential in the pool has been
tried for one logical call without a usable or terminal response.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gemini_gateway.retry.metadata import RetryMetadata


class RetryExhausted(Exception):
    """
    Raised when all N attempts ended in retryable failures.

    Attributes:
        retry_metadata: Complete attempt history
        last_failure: Details of the final failure (transport or malformed)
    """

    def __init__(
        self,
        retry_metadata: "RetryMetadata",
        last_failure: dict,
    ) -> None:
        self.retry_metadata = retry_metadata
        self.last_failure = last_failure

        super().__init__(
            f"All credentials failed after {retry_metadata.total_attempts} attempts. "
            f"Final error: {last_failure.get('error_type', 'unknown')}"
        )
