"""
Failover engine: one logical call over up to N physical attempts.

States:
    Attempting(k)     k = 0..N-1, N = size of the credential pool
    Succeeded         text, safety block or filtered response returned
    ExhaustedFailure  every credential failed (raises RetryExhausted)

Per attempt:
    TransportFailure            -> rotate, backoff, next attempt
    Classified(Malformed)       -> rotate, backoff, next attempt
    Classified(SafetyBlocked)   -> terminal, no rotation
    Classified(FilteredEmpty)   -> terminal, no rotation
    Classified(Success)         -> return text, no rotation

Usage:
    engine = FailoverEngine(client, pool, backoff_seconds=0.5)
    outcome = await engine.execute(request)
"""

import asyncio
import time
from typing import Awaitable, Callable

import structlog

from gemini_gateway.credentials.pool import CredentialPool, mask_credential
from gemini_gateway.llm.base_client import BaseLLMClient
from gemini_gateway.models.enums import OutcomeKind
from gemini_gateway.models.llm_models import (
    Classified,
    FilteredEmpty,
    GenerationRequest,
    Malformed,
    SafetyBlocked,
    Success,
    TransportFailure,
)
from gemini_gateway.retry.exceptions import RetryExhausted
from gemini_gateway.retry.metadata import CallOutcome, RetryMetadata


logger = structlog.get_logger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class FailoverEngine:
    """
    Drive one logical call through the credential pool.

    Each credential gets exactly one chance per call. Rotation happens only
    on retryable failures, so a successful or terminal response leaves the
    cursor on the credential that produced it for the next call.

    Attributes:
        client: Client performing physical attempts
        pool: Shared credential pool
        backoff_seconds: Fixed pause after each failed attempt
    """

    def __init__(
        self,
        client: BaseLLMClient,
        pool: CredentialPool,
        backoff_seconds: float = 0.5,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize failover engine.

        Args:
            client: Client performing physical attempts
            pool: Shared credential pool (its size bounds the attempts)
            backoff_seconds: Fixed delay after every failed attempt
            sleep: Coroutine used for the delay (tests inject a no-op)
        """
        self.client = client
        self.pool = pool
        self.backoff_seconds = backoff_seconds
        self._sleep = sleep

        logger.info(
            "FailoverEngine initialized",
            pool_size=len(pool),
            backoff_seconds=backoff_seconds,
        )

    async def execute(self, request: GenerationRequest) -> CallOutcome:
        """
        Execute a logical call with credential failover.

        Args:
            request: Immutable generation request

        Returns:
            CallOutcome of kind SUCCESS, SAFETY_BLOCKED or FILTERED

        Raises:
            RetryExhausted: All N attempts ended in transport failures or
                malformed responses
        """
        start_time_ms = int(time.time() * 1000)
        max_attempts = len(self.pool)
        credential_indices: list[int] = []
        failures: list[dict] = []

        logger.info("Starting failover execution", max_attempts=max_attempts)

        attempt = 0
        while attempt < max_attempts:
            credential = self.pool.current()
            credential_indices.append(self.pool.index)

            result = await self.client.submit(request, credential)

            if isinstance(result, Classified) and not isinstance(result.response, Malformed):
                response = result.response
                metadata = self._build_metadata(credential_indices, failures, start_time_ms)

                if isinstance(response, Success):
                    logger.info(
                        "Failover call succeeded",
                        total_attempts=metadata.total_attempts,
                        credential_index=self.pool.index,
                        total_latency_ms=metadata.total_latency_ms,
                    )
                    return CallOutcome(
                        kind=OutcomeKind.SUCCESS, metadata=metadata, text=response.text
                    )

                if isinstance(response, SafetyBlocked):
                    return CallOutcome(
                        kind=OutcomeKind.SAFETY_BLOCKED,
                        metadata=metadata,
                        reason=response.block_reason,
                    )

                if isinstance(response, FilteredEmpty):
                    return CallOutcome(
                        kind=OutcomeKind.FILTERED,
                        metadata=metadata,
                        reason=response.finish_reason,
                    )

            failure = self._describe_failure(result, attempt)
            failures.append(failure)

            logger.warning(
                f"Attempt {attempt + 1} failed. Rotating credential.",
                attempt=attempt + 1,
                max_attempts=max_attempts,
                credential=mask_credential(credential),
                error_type=failure["error_type"],
                status_code=failure.get("status_code"),
            )

            attempt += 1
            self.pool.rotate()
            await self._sleep(self.backoff_seconds)

        metadata = self._build_metadata(credential_indices, failures, start_time_ms)

        logger.error(
            "All credentials failed",
            total_attempts=metadata.total_attempts,
            total_latency_ms=metadata.total_latency_ms,
            final_error_type=failures[-1]["error_type"],
        )

        raise RetryExhausted(retry_metadata=metadata, last_failure=failures[-1])

    @staticmethod
    def _describe_failure(result: TransportFailure | Classified, attempt: int) -> dict:
        """Flatten a retryable attempt result into a failure record."""
        if isinstance(result, TransportFailure):
            return {
                "attempt": attempt + 1,
                "error_type": result.error_type,
                "reason": result.reason,
                "status_code": result.status_code,
            }
        return {
            "attempt": attempt + 1,
            "error_type": "MalformedResponse",
            "reason": "Empty response from AI",
            "status_code": None,
        }

    @staticmethod
    def _build_metadata(
        credential_indices: list[int], failures: list[dict], start_time_ms: int
    ) -> RetryMetadata:
        return RetryMetadata(
            total_attempts=len(credential_indices),
            credential_indices=list(credential_indices),
            total_latency_ms=max(0, int(time.time() * 1000) - start_time_ms),
            failures=list(failures),
        )
