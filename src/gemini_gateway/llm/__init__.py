"""
Gemini client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for one-attempt clients
- GeminiClient: httpx implementation for generateContent
- PromptBuilder: Builds chat and outline GenerationRequests
- classify_response: Maps a decoded body to a ProviderResponse
- exceptions: Transport-level exceptions raised inside the client
"""

from gemini_gateway.llm.base_client import BaseLLMClient
from gemini_gateway.llm.classifier import classify_response
from gemini_gateway.llm.gemini_client import GeminiClient
from gemini_gateway.llm.prompt_builder import PERMISSIVE_SAFETY_SETTINGS, PromptBuilder
from gemini_gateway.llm.exceptions import (
    LLMClientError,
    LLMConnectionError,
    LLMHTTPStatusError,
    LLMInvalidResponseError,
    LLMTimeoutError,
)

__all__ = [
    "BaseLLMClient",
    "GeminiClient",
    "PromptBuilder",
    "PERMISSIVE_SAFETY_SETTINGS",
    "classify_response",
    "LLMClientError",
    "LLMConnectionError",
    "LLMHTTPStatusError",
    "LLMInvalidResponseError",
    "LLMTimeoutError",
]
