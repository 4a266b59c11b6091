"""
Gemini client implementation for one physical attempt.

Communicates with the generateContent REST endpoint using httpx AsyncClient:
- Credential passed as the `key` query parameter
- Connection pooling via a persistent client
- Every failure converted into a tagged TransportFailure
- 2xx JSON bodies classified before they leave the client
"""

import time
from typing import Any, Optional

import httpx
import structlog

from gemini_gateway.credentials.pool import mask_credential
from gemini_gateway.llm.base_client import BaseLLMClient
from gemini_gateway.llm.classifier import classify_response
from gemini_gateway.llm.exceptions import (
    LLMClientError,
    LLMConnectionError,
    LLMHTTPStatusError,
    LLMInvalidResponseError,
    LLMTimeoutError,
)
from gemini_gateway.models.llm_models import (
    AttemptResult,
    Classified,
    GenerationRequest,
    TransportFailure,
)
from gemini_gateway.monitoring.metrics import attempt_latency_seconds, attempts_total


logger = structlog.get_logger(__name__)

ERROR_BODY_LOG_LIMIT = 500  # chars of provider error body kept in logs


class GeminiClient(BaseLLMClient):
    """
    Gemini generateContent client using httpx for async HTTP communication.

    API Endpoint:
    - POST {base}/models/{model}:generateContent?key=<credential>

    Features:
    - Connection pooling via persistent AsyncClient
    - No internal retries: the failover engine owns retry and rotation
    - Provider error bodies logged (truncated) for diagnostics
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 60.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Gemini client.

        Args:
            endpoint_url: Full generateContent URL for the model
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Optional custom httpx transport (tests use httpx.MockTransport)
        """
        super().__init__(endpoint_url, timeout)

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def submit(self, request: GenerationRequest, credential: str) -> AttemptResult:
        """
        Send one request under `credential` and tag the outcome.

        Returns:
            TransportFailure for non-2xx, network errors, timeouts or an
            undecodable body; Classified with the classifier's verdict otherwise
        """
        start_time = time.time()

        try:
            body = await self._post(request.to_payload(), credential)
        except LLMClientError as e:
            attempt_latency_seconds.labels(success="false").observe(time.time() - start_time)
            attempts_total.labels(outcome="transport_failure").inc()
            return TransportFailure(
                reason=e.message,
                error_type=type(e).__name__,
                status_code=getattr(e, "status_code", None),
                details=e.details,
            )

        attempt_latency_seconds.labels(success="true").observe(time.time() - start_time)
        response = classify_response(body)
        attempts_total.labels(outcome=response.kind.value).inc()

        logger.info(
            "Gemini response classified",
            kind=response.kind.value,
            latency_ms=int((time.time() - start_time) * 1000),
        )
        return Classified(response=response)

    async def _post(self, payload: dict[str, Any], credential: str) -> dict[str, Any]:
        """POST the payload and return the decoded JSON object, or raise LLMClientError."""
        client = await self._get_client()

        logger.debug(
            "Sending generation request to Gemini",
            endpoint_url=self.endpoint_url,
            credential=mask_credential(credential),
            contents=len(payload.get("contents", [])),
        )

        try:
            response = await client.post(
                self.endpoint_url,
                params={"key": credential},
                json=payload,
            )
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.warning(
                "Gemini request timeout",
                timeout=self.timeout,
                credential=mask_credential(credential),
                error_type=type(e).__name__,
            )
            raise LLMTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout}
            )

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "Gemini HTTP error",
                status_code=status_code,
                credential=mask_credential(credential),
                error_body=e.response.text[:ERROR_BODY_LOG_LIMIT],
            )
            raise LLMHTTPStatusError(
                f"HTTP Error: {status_code}",
                status_code=status_code,
                details={"status": status_code},
            )

        except httpx.RequestError as e:
            # str(e) may carry the request URL, which includes the key
            logger.warning(
                "Gemini network error",
                credential=mask_credential(credential),
                error_type=type(e).__name__,
            )
            raise LLMConnectionError(
                "Network error while contacting Gemini",
                details={"error_type": type(e).__name__}
            )

        # Every decode error is a transport failure, RecursionError on deep nesting included
        try:
            body = response.json()
        except Exception as e:
            logger.error(
                "Failed to parse Gemini response JSON",
                error_type=type(e).__name__,
                error=str(e)[:ERROR_BODY_LOG_LIMIT],
            )
            raise LLMInvalidResponseError(
                "Invalid JSON response from Gemini",
                details={"parse_error": type(e).__name__}
            )

        if not isinstance(body, dict):
            logger.error("Gemini response is not a JSON object", body_type=type(body).__name__)
            raise LLMInvalidResponseError(
                "Gemini response is not a JSON object",
                details={"body_type": type(body).__name__}
            )

        return body

    async def close(self):
        """Close HTTP client and cleanup connections."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.info("Gemini client closed")
