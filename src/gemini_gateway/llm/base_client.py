"""
Abstract base client for generation endpoints.

Defines the interface the failover engine depends on: one physical attempt
under one credential, returning a tagged AttemptResult. This abstraction
lets tests drive the engine with scripted results instead of real HTTP.
"""

from abc import ABC, abstractmethod

import structlog

from gemini_gateway.models.llm_models import AttemptResult, GenerationRequest


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for generation clients.

    Responsibilities:
    - Send one request under the given credential
    - Convert every transport-level failure into TransportFailure
    - Classify 2xx JSON bodies into a ProviderResponse

    Does NOT handle:
    - Payload construction (that's PromptBuilder's job)
    - Credential rotation or retries (that's FailoverEngine's job)
    """

    def __init__(self, endpoint_url: str, timeout: float = 60.0):
        """
        Initialize base client.

        Args:
            endpoint_url: Full URL of the generation endpoint (no credential)
            timeout: Request timeout in seconds for one physical attempt
        """
        self.endpoint_url = endpoint_url
        self.timeout = timeout

        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            endpoint_url=self.endpoint_url,
            timeout=timeout,
        )

    @abstractmethod
    async def submit(self, request: GenerationRequest, credential: str) -> AttemptResult:
        """
        Perform one physical attempt.

        Implementations must not raise for transport problems: non-2xx
        statuses, network errors, timeouts and undecodable bodies are all
        returned as TransportFailure.

        Args:
            request: Immutable generation request
            credential: API key to authorize this attempt

        Returns:
            TransportFailure or Classified
        """
        pass

    async def close(self):
        """
        Close client connections and cleanup resources.

        Default implementation does nothing. Subclasses holding persistent
        connections should override.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"endpoint_url={self.endpoint_url}, "
            f"timeout={self.timeout}s)"
        )
