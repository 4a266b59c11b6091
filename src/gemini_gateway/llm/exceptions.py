"""
Custom exceptions for the Gemini client layer.

Raised inside GeminiClient while performing one physical attempt and
converted to a TransportFailure at the attempt boundary, so the failover
engine only ever sees tagged results.
"""


class LLMClientError(Exception):
    """
    Base exception for all client errors.

    All client exceptions inherit from this to allow catching any
    transport-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMConnectionError(LLMClientError):
    """
    Raised when the generation endpoint cannot be reached.

    Includes DNS failures, refused connections and dropped sockets.
    """
    pass


class LLMTimeoutError(LLMConnectionError):
    """Raised when a physical attempt exceeds the request timeout."""
    pass


class LLMHTTPStatusError(LLMClientError):
    """
    Raised when the endpoint answers with a non-2xx status.

    Every status is retried under the next credential, including 400.
    """
    def __init__(self, message: str, status_code: int, details: dict | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class LLMInvalidResponseError(LLMClientError):
    """Raised when a 2xx body is not a decodable JSON object."""
    pass
